"""Word graph construction from a sentence and a dictionary."""

import logging
from typing import AbstractSet

from .errors import InvalidArgumentError
from .models import Edge, Token, Vertex, WordGraph

logger = logging.getLogger(__name__)

# Shortest dictionary word ever matched; single characters are always edges.
MIN_WORD_LEN = 2
DEFAULT_MAX_WORD_LEN = 6


def check_sentence(sentence: str) -> None:
    """Reject non-string or empty sentences."""
    if not isinstance(sentence, str):
        raise InvalidArgumentError(
            f"sentence must be a str, got {type(sentence).__name__}"
        )
    if not sentence:
        raise InvalidArgumentError("sentence must not be empty")


def check_max_word_len(max_word_len: int) -> None:
    if (
        not isinstance(max_word_len, int)
        or isinstance(max_word_len, bool)
        or max_word_len < MIN_WORD_LEN
    ):
        raise InvalidArgumentError(
            f"max_word_len must be an integer >= {MIN_WORD_LEN}, got {max_word_len!r}"
        )


def split_sentence(
    sentence: str, dictionary: AbstractSet[str], max_word_len: int
) -> list[Token]:
    """Find every dictionary word occurring in the sentence.

    For each start position, candidate lengths are tried from
    ``min(max_word_len, remaining)`` down to 2 and every hit is kept.

    Args:
        sentence: Text to scan (indexed by character)
        dictionary: Known words
        max_word_len: Longest candidate length to look up

    Returns:
        Tokens ordered by start position, then by descending length
    """
    tokens = []
    length = len(sentence)
    for start in range(length):
        longest = min(max_word_len, length - start)
        for word_len in range(longest, MIN_WORD_LEN - 1, -1):
            sub_word = sentence[start : start + word_len]
            if sub_word in dictionary:
                tokens.append(Token(start=start, length=word_len, word=sub_word))
    return tokens


def build_graph(
    sentence: str,
    dictionary: AbstractSet[str],
    max_word_len: int = DEFAULT_MAX_WORD_LEN,
) -> WordGraph:
    """Build the segmentation DAG for ``sentence``.

    Vertex ``i`` is the boundary before character ``i``; vertex
    ``len(sentence)`` is the terminal vertex and has no outgoing edges.
    Every non-terminal vertex gets its single-character edge first, followed
    by one edge per dictionary hit starting there.

    Args:
        sentence: Non-empty text to segment
        dictionary: Known words, read only
        max_word_len: Longest dictionary word considered

    Returns:
        WordGraph with ``len(sentence) + 1`` vertices
    """
    check_sentence(sentence)
    check_max_word_len(max_word_len)

    length = len(sentence)
    vertices = []
    for i in range(length):
        vertex = Vertex(index=i)
        vertex.add_edge(Edge(endpoint=i + 1, word=sentence[i]))
        vertices.append(vertex)
    # Terminal vertex
    vertices.append(Vertex(index=length))

    tokens = split_sentence(sentence, dictionary, max_word_len)
    for token in tokens:
        vertices[token.start].add_edge(Edge(endpoint=token.end, word=token.word))

    graph = WordGraph(sentence=sentence, vertices=vertices)
    logger.debug(
        f"Built graph: {len(vertices)} vertices, {graph.edge_count} edges, "
        f"{len(tokens)} dictionary hits"
    )
    return graph
