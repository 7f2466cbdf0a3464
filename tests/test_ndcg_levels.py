import math

import pytest

from treceval.binary_gain import binary_g
from treceval.ndcg import ndcg
from treceval.ndcg_cut import ndcg_cut
from treceval.ndcg_levels import g_measure, r_ndcg
from treceval.relinfo import ResRels


def _binary(ranking, num_rel, num_nonrel=0):
    return ResRels(
        results_rel_list=tuple(ranking),
        num_ret=len(ranking),
        num_rel_ret=sum(1 for rel in ranking if rel >= 1),
        num_rel=num_rel,
        rel_levels=(num_nonrel, num_rel),
    )


BINARY_CASES = [
    ([1, 0, 1, 0], 3),
    ([0, 0, 1], 1),
    ([1, 1, 0, 0, 1, 0], 4),
    ([0, 1], 1),
    ([1, 0, 0, 0, 0, 1, 1], 3),
    ([1, 1], 2),
]


@pytest.mark.parametrize("ranking, num_rel", BINARY_CASES)
def test_g_matches_binary_g_for_binary_judgments(ranking, num_rel):
    res_rels = _binary(ranking, num_rel, num_nonrel=5)
    assert g_measure(res_rels) == pytest.approx(binary_g(res_rels))


@pytest.mark.parametrize("ranking, num_rel", BINARY_CASES)
def test_r_ndcg_binary_averages_cutoff_and_full_ndcg(ranking, num_rel):
    res_rels = _binary(ranking, num_rel, num_nonrel=5)
    at_r = ndcg_cut(res_rels, [num_rel])[0]
    if len(ranking) <= num_rel + 1:
        expected = at_r
    else:
        expected = (at_r + ndcg(res_rels)) / 2
    assert r_ndcg(res_rels) == pytest.approx(expected)


def test_perfect_graded_ranking_scores_one():
    res_rels = ResRels(
        results_rel_list=(2, 2, 1, 0, 0),
        num_ret=5,
        num_rel_ret=3,
        num_rel=3,
        rel_levels=(2, 1, 2),
    )
    assert r_ndcg(res_rels) == pytest.approx(1.0)
    assert g_measure(res_rels) == pytest.approx(1.0)


def test_r_ndcg_without_relevant_docs_is_zero():
    res_rels = _binary([0, 0, 0], 0, num_nonrel=3)
    assert r_ndcg(res_rels) == 0.0


def test_nothing_relevant_retrieved_scores_zero():
    res_rels = _binary([0, 0, 0], 2, num_nonrel=3)
    assert r_ndcg(res_rels) == 0.0
    assert g_measure(res_rels) == 0.0


def test_g_with_nothing_retrieved_is_zero():
    res_rels = _binary([], 2)
    assert g_measure(res_rels) == 0.0


def test_zero_gains_leave_no_averaging_point():
    res_rels = ResRels(
        results_rel_list=(1, 0),
        num_ret=2,
        num_rel_ret=1,
        num_rel=2,
        rel_levels=(2, 2),
    )
    assert math.isnan(r_ndcg(res_rels, {"1": 0.0}))
    assert g_measure(res_rels, {"1": 0.0}) == 0.0


@pytest.mark.parametrize("ranking, num_rel", BINARY_CASES)
def test_r_ndcg_is_invariant_to_scaling_the_gain(ranking, num_rel):
    res_rels = _binary(ranking, num_rel, num_nonrel=5)
    assert r_ndcg(res_rels, {"1": 5.0}) == pytest.approx(r_ndcg(res_rels))


def test_gain_params_accept_pairs_and_mappings_alike():
    res_rels = ResRels(
        results_rel_list=(1, 2, 0, 2),
        num_ret=4,
        num_rel_ret=3,
        num_rel=3,
        rel_levels=(3, 1, 2),
    )
    as_map = {"1": 3.5, "2": 9.0}
    as_pairs = [("1", 3.5), ("2", 9.0)]
    assert g_measure(res_rels, as_map) == pytest.approx(g_measure(res_rels, as_pairs))
    assert r_ndcg(res_rels, as_map) == pytest.approx(r_ndcg(res_rels, as_pairs))


@pytest.mark.parametrize("ranking, num_rel", BINARY_CASES)
def test_values_lie_in_unit_interval(ranking, num_rel):
    res_rels = _binary(ranking, num_rel, num_nonrel=5)
    assert 0.0 <= g_measure(res_rels) <= 1.0
    assert 0.0 <= r_ndcg(res_rels) <= 1.0