"""Dynamic-programming enumeration of segmentation paths."""

import logging
from typing import Optional

from .errors import InvalidArgumentError, ResourceExhaustedError
from .models import PathCollection, Path, WordGraph

logger = logging.getLogger(__name__)


def check_max_paths(max_paths: Optional[int]) -> None:
    if max_paths is not None and max_paths <= 0:
        raise InvalidArgumentError(f"max_paths must be positive, got {max_paths}")


class PathEnumerator:
    """Enumerate every path through a word graph, bucketed by weight.

    The sweep visits vertices in increasing index order. Since every edge
    points strictly forward, a vertex's buckets are complete by the time it
    is visited, and its paths are extended along each outgoing edge into the
    destination's buckets. Nothing is pruned.

    ``max_paths`` bounds the total number of paths materialized across all
    vertices; exceeding it raises ``ResourceExhaustedError``.
    """

    def __init__(self, max_paths: Optional[int] = None):
        check_max_paths(max_paths)
        self.max_paths = max_paths
        self.materialized = 0

    def _count(self, added: int, vertex: int) -> None:
        self.materialized += added
        if self.max_paths is not None and self.materialized > self.max_paths:
            raise ResourceExhaustedError(
                limit=self.max_paths, materialized=self.materialized, vertex=vertex
            )

    def compute_all_paths(self, graph: WordGraph) -> list[PathCollection]:
        """Run the sweep and return the bucket map of every vertex.

        Args:
            graph: Word graph to traverse

        Returns:
            One PathCollection per vertex; index 0 is always empty
        """
        self.materialized = 0
        collections = [PathCollection() for _ in graph.vertices]

        # Seed: one single-word path per edge leaving the start vertex
        start_edges = graph.vertices[0].edges if graph.vertices else []
        self._count(len(start_edges), 0)
        for edge in start_edges:
            collections[edge.endpoint].add(Path.from_edge(edge))

        for vertex in graph.vertices[1:]:
            current = collections[vertex.index]
            if not vertex.edges or not current:
                continue
            paths = list(current.paths())
            self._count(len(paths) * len(vertex.edges), vertex.index)
            for edge in vertex.edges:
                target = collections[edge.endpoint]
                for path in paths:
                    target.add(path.extend(edge))

        logger.debug(
            f"Enumerated {self.materialized} paths over {len(collections)} vertices"
        )
        return collections

    def compute_paths(self, graph: WordGraph) -> PathCollection:
        """Return the weight buckets of the terminal vertex.

        The result holds every full segmentation of the sentence.
        """
        return self.compute_all_paths(graph)[graph.terminal]


def compute_paths(graph: WordGraph, max_paths: Optional[int] = None) -> PathCollection:
    """Convenience wrapper around ``PathEnumerator.compute_paths``."""
    return PathEnumerator(max_paths=max_paths).compute_paths(graph)
