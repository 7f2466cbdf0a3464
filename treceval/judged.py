"""Measures that use only judged documents: bpref, gm_bpref and infAP."""

from __future__ import annotations

import math

from .relinfo import ResRels

RELVALUE_NONPOOL = -1
RELVALUE_UNJUDGED = -2
MIN_GEO_MEAN = 0.00001
INFAP_EPSILON = 0.00001


def _is_nonrel(rel: int, relevance_level: int) -> bool:
    return 0 <= rel < relevance_level


def bpref(res_rels: ResRels, relevance_level: int = 1) -> float:
    """Fraction of preferences of relevant over top-R nonrelevant docs kept."""
    num_nonrel = sum(res_rels.rel_levels[:relevance_level])
    num_rel = res_rels.num_rel
    nonrel_so_far = 0
    total = 0.0
    for rel in res_rels.results_rel_list[: res_rels.num_ret]:
        if rel in (RELVALUE_NONPOOL, RELVALUE_UNJUDGED):
            continue
        if _is_nonrel(rel, relevance_level):
            nonrel_so_far += 1
        elif nonrel_so_far > 0:
            total += 1.0 - min(nonrel_so_far, num_rel) / min(num_nonrel, num_rel)
        else:
            total += 1.0
    if num_rel:
        total /= num_rel
    return total


def gm_bpref(res_rels: ResRels, relevance_level: int = 1) -> float:
    """Log of bpref, floored at MIN_GEO_MEAN, for geometric averaging."""
    return math.log(max(bpref(res_rels, relevance_level), MIN_GEO_MEAN))


def inferred_ap(res_rels: ResRels, relevance_level: int = 1) -> float:
    """Inferred average precision over a sampled judgment pool."""
    nonrel_so_far = 0
    rel_so_far = 0
    pool_unjudged_so_far = 0
    inf_ap = 0.0
    for rank, rel in enumerate(res_rels.results_rel_list[: res_rels.num_ret]):
        if rel == RELVALUE_NONPOOL:
            continue
        if rel == RELVALUE_UNJUDGED:
            pool_unjudged_so_far += 1
            continue
        if _is_nonrel(rel, relevance_level):
            nonrel_so_far += 1
            continue
        rel_so_far += 1
        if rank == 0:
            inf_ap += 1.0
        else:
            fj = float(rank)
            inf_ap += 1.0 / (fj + 1.0) + (fj / (fj + 1.0)) * (
                (rel_so_far - 1 + nonrel_so_far + pool_unjudged_so_far) / fj
            ) * (
                (rel_so_far - 1 + INFAP_EPSILON)
                / (rel_so_far - 1 + nonrel_so_far + 2 * INFAP_EPSILON)
            )
    if res_rels.num_rel:
        inf_ap /= res_rels.num_rel
    return inf_ap