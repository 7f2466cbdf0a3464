"""Precision after R documents and at multiples of R."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Sequence

from .relinfo import ResRels, ResRelsJg

DEFAULT_MULTIPLES = (0.2, 0.4, 0.6, 0.8, 1.0, 1.2, 1.4, 1.6, 1.8, 2.0)


def r_precision(res_rels: ResRels, relevance_level: int = 1) -> float:
    """Precision after R docs are retrieved, R being the number of relevant docs.

    Returns 0.0 when nothing is retrieved or there are no relevant docs.
    """
    num_to_look_at = min(res_rels.num_ret, res_rels.num_rel)
    if num_to_look_at == 0:
        return 0.0
    rel_so_far = sum(
        1
        for rel in islice(res_rels.results_rel_list, num_to_look_at)
        if rel >= relevance_level
    )
    return rel_so_far / res_rels.num_rel


def _mult_values(
    res_rels: ResRels, multiples: Sequence[float], relevance_level: int
) -> list[float]:
    # Multiples of R become doc cutoffs; the 0.9 matches historical rounding.
    cutoffs = [int(multiple * res_rels.num_rel + 0.9) for multiple in multiples]
    values = [0.0] * len(cutoffs)

    current_cut = len(cutoffs) - 1
    while current_cut >= 0 and cutoffs[current_cut] > res_rels.num_ret:
        values[current_cut] = res_rels.num_rel_ret / cutoffs[current_cut]
        current_cut -= 1

    rel_so_far = res_rels.num_rel_ret
    rels = res_rels.results_rel_list
    for rank in range(res_rels.num_ret, 0, -1):
        if rel_so_far <= 0:
            break
        precis = rel_so_far / rank
        while current_cut >= 0 and rank == cutoffs[current_cut]:
            values[current_cut] = precis
            current_cut -= 1
        if rels[rank - 1] >= relevance_level:
            rel_so_far -= 1
    return values


def r_precision_mult(
    res_rels: ResRels,
    multiples: Iterable[float] = DEFAULT_MULTIPLES,
    relevance_level: int = 1,
) -> list[float]:
    """Precision at each multiple of R, in the order the multiples are given."""
    return _mult_values(res_rels, list(multiples), relevance_level)


def r_precision_mult_avgjg(
    res_rels_jg: ResRelsJg,
    multiples: Iterable[float] = DEFAULT_MULTIPLES,
    relevance_level: int = 1,
) -> list[float]:
    """Precision at multiples of R, averaged over judgment groups."""
    multiples = list(multiples)
    totals = [0.0] * len(multiples)
    for jg in res_rels_jg.jgs:
        totals = [
            total + value
            for total, value in zip(totals, _mult_values(jg, multiples, relevance_level))
        ]
    num_jgs = res_rels_jg.num_jgs()
    if num_jgs > 1:
        totals = [total / num_jgs for total in totals]
    return totals