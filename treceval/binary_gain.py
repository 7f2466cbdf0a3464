"""Binary G: gain restricted to relevant or not, discounted by nonrel seen."""

from __future__ import annotations

import math

from .relinfo import ResRels


def binary_g(res_rels: ResRels, relevance_level: int = 1) -> float:
    """Average over relevant docs of 1 / log2(2 + nonrelevant docs before it)."""
    rel_so_far = 0
    total = 0.0
    for rank, rel in enumerate(res_rels.results_rel_list[: res_rels.num_ret]):
        if rel >= relevance_level:
            rel_so_far += 1
            total += 1.0 / math.log2(3 + rank - rel_so_far)
    if rel_so_far:
        return total / res_rels.num_rel
    return 0.0