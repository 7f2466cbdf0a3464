import math

import pytest

from treceval.binary_gain import binary_g
from treceval.relinfo import ResRels


def make(rels, rel_levels, relevance_level=1):
    return ResRels(
        results_rel_list=tuple(rels),
        num_ret=len(rels),
        num_rel_ret=sum(1 for rel in rels if rel >= relevance_level),
        num_rel=sum(rel_levels[relevance_level:]),
        rel_levels=tuple(rel_levels),
    )


def test_no_nonrel_before_relevant_docs():
    res = make([1, 1, 0], [3, 3])
    assert binary_g(res) == pytest.approx(res.num_rel_ret / res.num_rel)


def test_single_nonrel_before_relevant_doc():
    res = make([0, 1], [1, 1])
    assert binary_g(res) == pytest.approx(1 / math.log2(3))


def test_no_relevant_retrieved():
    assert binary_g(make([0, 0, 0], [3, 2])) == 0.0


def test_earlier_nonrel_lowers_score():
    good = make([1, 0, 1, 0], [2, 2])
    bad = make([0, 0, 1, 1], [2, 2])
    assert binary_g(good) > binary_g(bad)


def test_bounded_by_one():
    value = binary_g(make([0, 1, 1, 0, 1], [4, 3]))
    assert 0.0 < value <= 1.0


def test_relevance_level_two_treats_level_one_as_nonrel():
    res = make([1, 2], [1, 1, 1], relevance_level=2)
    assert binary_g(res, 2) == pytest.approx(binary_g(make([0, 1], [1, 1])))