"""Average precision measures and interpolated precision at recall points."""

from __future__ import annotations

import math
from itertools import accumulate, islice
from typing import Iterable, Sequence

from .judged import MIN_GEO_MEAN
from .precision import DEFAULT_CUTOFFS, _checked_cutoffs
from .relinfo import ResRels, ResRelsJg

DEFAULT_RECALL_POINTS = (0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0)


def _retrieved(res_rels: ResRels) -> Iterable[int]:
    return islice(res_rels.results_rel_list, res_rels.num_ret)


def _precision_contributions(res_rels: ResRels, relevance_level: int) -> Iterable[float]:
    """Precision at each retrieved doc if it is relevant, else 0.0."""
    rel_so_far = 0
    for rank, rel in enumerate(_retrieved(res_rels), start=1):
        if rel >= relevance_level:
            rel_so_far += 1
            yield rel_so_far / rank
        else:
            yield 0.0


def _ap_sum(res_rels: ResRels, relevance_level: int) -> tuple[float, int]:
    total = 0.0
    rel_so_far = 0
    rel_so_far_ranks = 0
    for rank, rel in enumerate(_retrieved(res_rels), start=1):
        if rel >= relevance_level:
            rel_so_far += 1
            total += rel_so_far / rank
    return total, rel_so_far


def average_precision(res_rels: ResRels, relevance_level: int = 1) -> float:
    """Precision after each relevant doc, averaged over all relevant docs."""
    total, rel_so_far = _ap_sum(res_rels, relevance_level)
    if rel_so_far:
        return total / res_rels.num_rel
    return 0.0


def average_precision_avgjg(res_rels_jg: ResRelsJg, relevance_level: int = 1) -> float:
    """Average precision averaged over judgment groups."""
    value = 0.0
    for jg in res_rels_jg.jgs:
        total, rel_so_far = _ap_sum(jg, relevance_level)
        if rel_so_far:
            value += total / jg.num_rel
    num_jgs = res_rels_jg.num_jgs()
    if num_jgs > 1:
        value /= num_jgs
    return value


def average_precision_at(
    res_rels: ResRels,
    cutoffs: Iterable[int] = DEFAULT_CUTOFFS,
    relevance_level: int = 1,
) -> list[float]:
    """Average precision truncated at each doc cutoff, in the order given.

    Docs past the end of the retrieval count as non-relevant.
    All values are 0.0 when the topic has no relevant docs.
    """
    checked = _checked_cutoffs(cutoffs)
    if res_rels.num_rel == 0:
        return [0.0] * len(checked)
    sums = list(
        accumulate(_precision_contributions(res_rels, relevance_level), initial=0.0)
    )
    last = len(sums) - 1
    return [sums[min(cutoff, last)] / res_rels.num_rel for cutoff in checked]


def gm_average_precision(res_rels: ResRels, relevance_level: int = 1) -> float:
    """Log of average precision, floored at MIN_GEO_MEAN, for geometric means."""
    return math.log(max(average_precision(res_rels, relevance_level), MIN_GEO_MEAN))


def _interpolated(
    res_rels: ResRels, recall_points: Sequence[float], relevance_level: int
) -> list[float]:
    # Recall fractions become numbers of relevant docs; the 0.9 keeps the
    # historical cutoffs for the default eleven points.
    cutoffs = [int(point * res_rels.num_rel + 0.9) for point in recall_points]
    values = [0.0] * len(cutoffs)

    current_cut = len(cutoffs) - 1
    while current_cut >= 0 and cutoffs[current_cut] > res_rels.num_rel_ret:
        current_cut -= 1

    # With nothing retrieved precision is undefined.
    if res_rels.num_ret:
        int_precis = res_rels.num_rel_ret / res_rels.num_ret
    else:
        int_precis = math.nan

    # Interpolated precision at X is the maximum precision at any rank >= X,
    # so walk the ranking backwards.
    rel_so_far = res_rels.num_rel_ret
    rels = res_rels.results_rel_list
    for rank in range(res_rels.num_ret, 0, -1):
        if rel_so_far <= 0:
            break
        int_precis = max(int_precis, rel_so_far / rank)
        if rels[rank - 1] >= relevance_level:
            while current_cut >= 0 and rel_so_far == cutoffs[current_cut]:
                values[current_cut] = int_precis
                current_cut -= 1
            rel_so_far -= 1

    while current_cut >= 0:
        values[current_cut] = int_precis
        current_cut -= 1
    return values


def interpolated_precision_at_recall(
    res_rels: ResRels,
    recall_points: Iterable[float] = DEFAULT_RECALL_POINTS,
    relevance_level: int = 1,
) -> list[float]:
    """Interpolated precision at each recall point, in the order given."""
    return _interpolated(res_rels, list(recall_points), relevance_level)


def eleven_point_average(
    res_rels: ResRels,
    recall_points: Iterable[float] = DEFAULT_RECALL_POINTS,
    relevance_level: int = 1,
) -> float:
    """Interpolated precision averaged over the recall points."""
    points = list(recall_points)
    if not points:
        raise ValueError("no cutoff values")
    values = _interpolated(res_rels, points, relevance_level)
    return sum(reversed(values)) / len(points)