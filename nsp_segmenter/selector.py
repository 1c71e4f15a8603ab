"""Selection of the N lightest weight classes."""

from .errors import InvalidArgumentError
from .models import Path, PathCollection


def check_n_path(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
        raise InvalidArgumentError(f"n_path must be a positive integer, got {n!r}")


def rank_weight_classes(
    collection: PathCollection, n: int
) -> list[tuple[int, int, list[Path]]]:
    """Return the ``n`` lightest weight classes of a path collection.

    Args:
        collection: Weight buckets of the terminal vertex
        n: Number of distinct weight classes to keep

    Returns:
        List of (rank, weight, paths) tuples, rank starting at 1, lightest
        weight first
    """
    check_n_path(n)
    weights = collection.weights()[:n]
    return [
        (rank, weight, collection.bucket(weight))
        for rank, weight in enumerate(weights, 1)
    ]


def select_top_n(collection: PathCollection, n: int) -> list[Path]:
    """Return every path whose weight is among the ``n`` smallest weights.

    Selection is by weight class, not by path count: all paths tied at a
    selected weight are returned, so the result usually holds more than
    ``n`` paths. Paths come out lightest class first, in insertion order
    within a class.
    """
    result = []
    for _, _, paths in rank_weight_classes(collection, n):
        result.extend(paths)
    return result
