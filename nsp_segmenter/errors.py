"""Exceptions raised by the segmentation engine."""


class SegmentationError(Exception):
    """Base class for segmentation errors."""


class InvalidArgumentError(SegmentationError, ValueError):
    """Raised when a segmentation call receives an unusable argument.

    Covers empty sentences, ``n_path <= 0``, ``max_word_len < 2`` and
    non-positive path caps. Always raised before any graph is built.
    """


class ResourceExhaustedError(SegmentationError, RuntimeError):
    """Raised when path enumeration materializes more paths than allowed."""

    def __init__(self, limit: int, materialized: int, vertex: int | None = None):
        self.limit = limit
        self.materialized = materialized
        self.vertex = vertex
        message = f"Materialized {materialized} paths, exceeding the cap of {limit}"
        if vertex is not None:
            message += f" (while relaxing vertex {vertex})"
        super().__init__(message)
