"""N-shortest-path segmentation engine."""

import logging
from typing import AbstractSet, Iterable, Optional

from .enumerator import PathEnumerator, check_max_paths
from .graph import DEFAULT_MAX_WORD_LEN, build_graph, check_max_word_len, check_sentence
from .models import Path, PathCollection, WordGraph
from .selector import check_n_path, rank_weight_classes, select_top_n

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "-"


class NShortestPathSegmenter:
    """Dictionary-driven N-shortest-path word segmenter.

    Every segmentation of a sentence is a path through the word graph whose
    weight is its word count. ``segment`` returns all segmentations in the
    ``n_path`` lightest weight classes.
    """

    def __init__(
        self,
        n_path: int,
        dictionary: Optional[Iterable[str]] = None,
        max_word_len: int = DEFAULT_MAX_WORD_LEN,
        max_paths: Optional[int] = None,
        delimiter: str = DEFAULT_DELIMITER,
    ):
        """Initialize the segmenter.

        Args:
            n_path: Number of distinct weight classes to return
            dictionary: Known words; entries outside ``[2, max_word_len]``
                characters are never matched
            max_word_len: Longest dictionary word considered
            max_paths: Cap on materialized paths per call (None = unbounded)
            delimiter: Separator placed between words in rendered results
        """
        check_n_path(n_path)
        check_max_word_len(max_word_len)
        check_max_paths(max_paths)
        self.n_path = n_path
        self.max_word_len = max_word_len
        self.max_paths = max_paths
        self.delimiter = delimiter
        self.dictionary: AbstractSet[str] = frozenset()
        if dictionary is not None:
            self.set_dict(dictionary)

    def set_dict(self, dictionary: Iterable[str]) -> None:
        """Replace the dictionary. An empty dictionary keeps the current one."""
        words = frozenset(dictionary)
        if words:
            self.dictionary = words
        else:
            logger.debug("Ignoring empty dictionary; keeping current entries")

    def build_graph(self, sentence: str) -> WordGraph:
        return build_graph(sentence, self.dictionary, self.max_word_len)

    def compute_paths(self, sentence: str) -> PathCollection:
        """All full segmentations of ``sentence`` bucketed by weight."""
        graph = self.build_graph(sentence)
        return PathEnumerator(max_paths=self.max_paths).compute_paths(graph)

    def segment_paths(self, sentence: str) -> list[Path]:
        """Segment ``sentence`` and return the selected paths."""
        check_sentence(sentence)
        paths = select_top_n(self.compute_paths(sentence), self.n_path)
        logger.debug(f"Selected {len(paths)} paths for a {len(sentence)}-character sentence")
        return paths

    def segment_ranked(self, sentence: str) -> list[tuple[int, int, list[Path]]]:
        """Like ``segment_paths`` but keeps the (rank, weight, paths) grouping."""
        check_sentence(sentence)
        return rank_weight_classes(self.compute_paths(sentence), self.n_path)

    def segment(self, sentence: str) -> list[str]:
        """Segment ``sentence`` into delimiter-joined word sequences."""
        return [path.join(self.delimiter) for path in self.segment_paths(sentence)]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(n_path={self.n_path}, "
            f"max_word_len={self.max_word_len}, max_paths={self.max_paths}, "
            f"dictionary_size={len(self.dictionary)})"
        )


def segment(
    sentence: str,
    dictionary: Iterable[str],
    n_path: int,
    max_word_len: int = DEFAULT_MAX_WORD_LEN,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    max_paths: Optional[int] = None,
) -> list[str]:
    """Segment a sentence and return the N lightest weight classes.

    Args:
        sentence: Non-empty text to segment
        dictionary: Known words
        n_path: Number of distinct weight classes (not results) to return
        max_word_len: Longest dictionary word considered
        delimiter: Separator between words in each result
        max_paths: Cap on materialized paths (None = unbounded)

    Returns:
        Segmentations, lightest weight class first

    Raises:
        InvalidArgumentError: On an empty sentence or bad numeric arguments
        ResourceExhaustedError: If more than ``max_paths`` paths are built
    """
    segmenter = NShortestPathSegmenter(
        n_path=n_path,
        dictionary=dictionary,
        max_word_len=max_word_len,
        max_paths=max_paths,
        delimiter=delimiter,
    )
    return segmenter.segment(sentence)
