import pytest

from treceval.ndcg_cut import ndcg_cut
from treceval.precision import DEFAULT_CUTOFFS
from treceval.relinfo import ResRels


def make(rels, rel_levels):
    rels = list(rels)
    return ResRels(
        results_rel_list=rels,
        num_ret=len(rels),
        num_rel_ret=sum(1 for r in rels if r >= 1),
        num_rel=sum(rel_levels[1:]),
        rel_levels=rel_levels,
    )


PERFECT = make([2, 1, 0], (1, 1, 1))
REVERSED = make([1, 2, 0], (1, 1, 1))


def test_perfect_ranking_is_one_at_every_cutoff():
    assert ndcg_cut(PERFECT, [1, 2, 3, 10]) == pytest.approx([1.0] * 4)


def test_default_cutoffs_used():
    assert len(ndcg_cut(PERFECT)) == len(DEFAULT_CUTOFFS)


def test_swapped_ranking_is_below_perfect():
    values = ndcg_cut(REVERSED, [1, 2, 5])
    assert all(0.0 < v < 1.0 for v in values)


def test_values_constant_past_all_docs():
    values = ndcg_cut(REVERSED, [5, 10, 100])
    assert values[0] == pytest.approx(values[1])
    assert values[1] == pytest.approx(values[2])


def test_no_relevant_docs_gives_zero():
    rr = make([0, 0, 0], (3,))
    assert ndcg_cut(rr, [1, 5]) == [0.0, 0.0]


def test_result_follows_cutoff_order():
    forward = ndcg_cut(REVERSED, [1, 2])
    backward = ndcg_cut(REVERSED, [2, 1])
    assert backward == list(reversed(forward))


def test_unjudged_markers_add_no_gain():
    rr = make([-1, 2, 1], (0, 1, 1))
    shifted = ndcg_cut(rr, [3])[0]
    assert 0.0 < shifted < 1.0


@pytest.mark.parametrize("cutoffs", [[0], [3, 3], [-2, 4]])
def test_rejects_bad_cutoffs(cutoffs):
    with pytest.raises(ValueError):
        ndcg_cut(PERFECT, cutoffs)