import pytest

from treceval.relinfo import (
    ResRels,
    ResRelsJg,
    num_nonrel_judged_ret,
    num_q_average,
    num_rel,
    num_rel_ret,
    num_ret,
    total_num_rel,
)


@pytest.fixture
def sample():
    return ResRels(
        results_rel_list=[1, 0, -1, 2, -2, 0, 1],
        num_ret=7,
        num_rel_ret=3,
        num_rel=5,
        num_nonpool=1,
        num_unjudged_in_pool=1,
        rel_levels=[4, 3, 2],
    )


def test_simple_counts_come_from_summary(sample):
    assert num_ret(sample) == sample.num_ret
    assert num_rel_ret(sample) == sample.num_rel_ret
    assert num_rel(sample) == sample.num_rel


def test_nonrel_judged_partitions_retrieved(sample):
    parts = (
        num_nonrel_judged_ret(sample)
        + sample.num_nonpool
        + sample.num_unjudged_in_pool
        + sample.num_rel_ret
    )
    assert parts == num_ret(sample)


def test_nonrel_judged_all_relevant_is_zero():
    rr = ResRels(results_rel_list=[1, 1, 1], num_ret=3, num_rel_ret=3, num_rel=3)
    assert num_nonrel_judged_ret(rr) == 0


def test_num_rel_levels(sample):
    assert sample.num_rel_levels() == len(sample.rel_levels)


def test_num_jgs(sample):
    jg = ResRelsJg(jgs=[sample, sample, ResRels()])
    assert jg.num_jgs() == len(jg.jgs)
    assert ResRelsJg().num_jgs() == 0


def test_total_num_rel_counts_positive_only():
    rels = [1, 2, 3, 1, 4]
    assert total_num_rel([("qrels", rels + [0, 0, -1])]) == len(rels)


def test_total_num_rel_all_nonrelevant():
    assert total_num_rel([("qrels", [0, 0]), ("qrels_jg", [[0], [-1, 0]])]) == 0


def test_total_num_rel_is_additive():
    a = ("qrels", [0, 1, 2, 0])
    b = ("qrels_jg", [[1, 0], [3, 3]])
    assert total_num_rel([a, b]) == total_num_rel([a]) + total_num_rel([b])


def test_total_num_rel_jg_matches_flat():
    groups = [[1, 0, 2], [0, 5]]
    flat = [rel for group in groups for rel in group]
    assert total_num_rel([("qrels_jg", groups)]) == total_num_rel([("qrels", flat)])


def test_total_num_rel_unknown_format():
    with pytest.raises(ValueError):
        total_num_rel([("prefs", [1, 2])])


def test_num_q_average():
    assert num_q_average(7, 9, False) == 7
    assert num_q_average(7, 9, True) == 9