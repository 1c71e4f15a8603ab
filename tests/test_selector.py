"""Tests for weight-class selection."""

import pytest

from nsp_segmenter.errors import InvalidArgumentError
from nsp_segmenter.models import Path, PathCollection
from nsp_segmenter.selector import rank_weight_classes, select_top_n


@pytest.fixture
def collection():
    c = PathCollection()
    c.add(Path(5, ("a", "b", "c", "d", "e")))
    c.add(Path(3, ("ab", "c", "de")))
    c.add(Path(3, ("a", "bc", "de")))
    c.add(Path(4, ("ab", "c", "d", "e")))
    c.add(Path(3, ("ab", "cd", "e")))
    return c


class TestSelectTopN:
    """Tests for select_top_n."""

    def test_returns_all_ties_at_minimum(self, collection):
        result = select_top_n(collection, 1)
        assert [p.words for p in result] == [
            ("ab", "c", "de"),
            ("a", "bc", "de"),
            ("ab", "cd", "e"),
        ]

    def test_selects_weight_classes_not_path_count(self, collection):
        result = select_top_n(collection, 2)
        assert len(result) == 4
        assert {p.weight for p in result} == {3, 4}

    def test_n_larger_than_class_count(self, collection):
        assert len(select_top_n(collection, 10)) == 5

    def test_monotonic_in_n(self, collection):
        smaller = set(select_top_n(collection, 1))
        larger = set(select_top_n(collection, 2))
        assert smaller <= larger

    def test_empty_collection(self):
        assert select_top_n(PathCollection(), 3) == []

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_n_rejected(self, collection, n):
        with pytest.raises(InvalidArgumentError):
            select_top_n(collection, n)


def test_rank_weight_classes(collection):
    ranked = rank_weight_classes(collection, 2)
    assert [(rank, weight, len(paths)) for rank, weight, paths in ranked] == [
        (1, 3, 3),
        (2, 4, 1),
    ]
