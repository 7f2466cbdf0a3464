"""Normalized discounted cumulative gain at document cutoffs."""

from __future__ import annotations

import math
from itertools import accumulate, islice
from typing import Iterable, Iterator

from .precision import DEFAULT_CUTOFFS, _checked_cutoffs
from .relinfo import ResRels


def _ideal_gains(res_rels: ResRels) -> Iterator[int]:
    """Relevance levels of an ideal ranking, highest first; level 0 excluded."""
    for level in range(res_rels.num_rel_levels() - 1, 0, -1):
        for _ in range(res_rels.rel_levels[level]):
            yield level


def _discounted(gains: Iterable[float]) -> Iterator[float]:
    for rank, gain in enumerate(gains):
        yield gain / math.log2(rank + 2) if gain > 0 else 0.0


def ndcg_cut(res_rels: ResRels, cutoffs: Iterable[int] = DEFAULT_CUTOFFS) -> list[float]:
    """nDCG at each cutoff, in the order given; gains are the relevance values.

    When the ideal DCG is zero the value is left as the unnormalized DCG.
    """
    checked = _checked_cutoffs(cutoffs)
    dcg = list(
        accumulate(
            _discounted(islice(res_rels.results_rel_list, res_rels.num_ret)),
            initial=0.0,
        )
    )
    ideal = list(accumulate(_discounted(_ideal_gains(res_rels)), initial=0.0))
    values = []
    for cutoff in checked:
        value = dcg[min(cutoff, len(dcg) - 1)]
        ideal_dcg = ideal[min(cutoff, len(ideal) - 1)]
        values.append(value / ideal_dcg if ideal_dcg > 0.0 else value)
    return values