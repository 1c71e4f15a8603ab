"""Tests for path enumeration."""

import pytest

from nsp_segmenter.enumerator import PathEnumerator, compute_paths
from nsp_segmenter.errors import InvalidArgumentError, ResourceExhaustedError
from nsp_segmenter.graph import build_graph


def _words(paths):
    return [p.words for p in paths]


class TestPathEnumerator:
    """Tests for the dynamic-programming sweep."""

    def test_terminal_buckets(self, small_dictionary):
        graph = build_graph("abc", small_dictionary)
        collection = compute_paths(graph)
        assert collection.weights() == [2, 3]
        assert _words(collection.bucket(2)) == [("a", "bc"), ("ab", "c")]
        assert _words(collection.bucket(3)) == [("a", "b", "c")]
        assert len(collection) == 3

    def test_start_vertex_has_no_paths(self, small_dictionary):
        graph = build_graph("abc", small_dictionary)
        collections = PathEnumerator().compute_all_paths(graph)
        assert len(collections) == 4
        assert len(collections[0]) == 0

    def test_intermediate_buckets(self, small_dictionary):
        graph = build_graph("abc", small_dictionary)
        collections = PathEnumerator().compute_all_paths(graph)
        assert _words(collections[1].bucket(1)) == [("a",)]
        assert _words(collections[2].bucket(1)) == [("ab",)]
        assert _words(collections[2].bucket(2)) == [("a", "b")]

    def test_weight_equals_word_count(self, oracle_sentence, oracle_dictionary):
        collection = compute_paths(build_graph(oracle_sentence, oracle_dictionary))
        for weight in collection.weights():
            for path in collection.bucket(weight):
                assert path.weight == weight == len(path.words)

    def test_paths_partition_each_prefix(self):
        sentence = "abcab"
        graph = build_graph(sentence, frozenset({"ab", "bca", "cab"}))
        collections = PathEnumerator().compute_all_paths(graph)
        for index, collection in enumerate(collections):
            for path in collection.paths():
                assert "".join(path.words) == sentence[:index]

    def test_weights_bounded_by_vertex_index(self):
        graph = build_graph("abcab", frozenset({"ab", "bca", "cab"}))
        collections = PathEnumerator().compute_all_paths(graph)
        for index, collection in enumerate(collections[1:], 1):
            assert max(collection.weights()) == index

    def test_single_character_sentence(self):
        collection = compute_paths(build_graph("a", frozenset()))
        assert _words(collection.paths()) == [("a",)]


class TestPathCap:
    """Tests for the materialized path cap."""

    def test_counts_materialized_paths(self, small_dictionary):
        enumerator = PathEnumerator()
        enumerator.compute_paths(build_graph("abc", small_dictionary))
        assert enumerator.materialized == 6

    def test_cap_at_count_succeeds(self, small_dictionary):
        graph = build_graph("abc", small_dictionary)
        capped = PathEnumerator(max_paths=6).compute_paths(graph)
        assert capped.weight_to_paths == compute_paths(graph).weight_to_paths

    def test_cap_below_count_raises(self, small_dictionary):
        graph = build_graph("abc", small_dictionary)
        with pytest.raises(ResourceExhaustedError) as exc_info:
            PathEnumerator(max_paths=5).compute_paths(graph)
        assert exc_info.value.limit == 5
        assert exc_info.value.materialized == 6
        assert exc_info.value.vertex == 2

    def test_non_positive_cap_rejected(self):
        with pytest.raises(InvalidArgumentError):
            PathEnumerator(max_paths=0)
