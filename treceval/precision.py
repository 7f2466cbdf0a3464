"""Precision at fixed document cutoffs."""

from __future__ import annotations

from itertools import accumulate, islice
from operator import index
from typing import Iterable, Sequence

from .relinfo import ResRels, ResRelsJg

DEFAULT_CUTOFFS = (5, 10, 15, 20, 30, 100, 200, 500, 1000)


def _checked_cutoffs(cutoffs: Iterable[int]) -> list[int]:
    values = [index(cutoff) for cutoff in cutoffs]
    if any(cutoff <= 0 for cutoff in values):
        raise ValueError("cutoffs must be positive")
    if len(set(values)) != len(values):
        raise ValueError("cutoffs must not contain duplicates")
    return values


def _precisions(res_rels: ResRels, cutoffs: Sequence[int], relevance_level: int) -> list[float]:
    # Retrieval is padded with non-relevant docs past num_ret.
    relevant_before = list(
        accumulate(
            (
                int(rel >= relevance_level)
                for rel in islice(res_rels.results_rel_list, res_rels.num_ret)
            ),
            initial=0,
        )
    )
    last = len(relevant_before) - 1
    return [relevant_before[min(cutoff, last)] / cutoff for cutoff in cutoffs]


def precision_at(res_rels: ResRels, cutoffs: Iterable[int], relevance_level: int) -> list[float]:
    """Precision at each cutoff, in the order the cutoffs are given."""
    return _precisions(res_rels, _checked_cutoffs(cutoffs), relevance_level)


def precision_at_avgjg(
    res_rels_jg: ResRelsJg, cutoffs: Iterable[int], relevance_level: int
) -> list[float]:
    """Precision at each cutoff, averaged over judgment groups."""
    checked = _checked_cutoffs(cutoffs)
    totals = [0.0] * len(checked)
    for jg in res_rels_jg.jgs:
        totals = [
            total + value
            for total, value in zip(totals, _precisions(jg, checked, relevance_level))
        ]
    num_jgs = res_rels_jg.num_jgs()
    if num_jgs > 1:
        totals = [total / num_jgs for total in totals]
    return totals