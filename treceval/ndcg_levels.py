"""Gain measures that follow the ideal ranking level by level: Rndcg and G.

Gains default to the relevance level and can be overridden by parameters
mapping a relevance level (as text, e.g. ``"2"``) to a gain, as for ndcg.
"""

from __future__ import annotations

import math
from itertools import islice

from .ndcg import GainParams, Gains, _ieee_div, setup_gains
from .relinfo import ResRels

_MIN_COST = 1.0


class _IdealWalk:
    """Gain of the ideal ranking, advanced one rank at a time.

    Before the first step, gain is the largest gain of any level.
    Levels with no judged docs are passed over.
    """

    def __init__(self, gains: Gains):
        self._levels = gains.rel_gains
        self._cur = len(self._levels) - 1
        self._count = 0
        self.gain = self._levels[self._cur].gain if self._levels else 0.0

    def step(self) -> float:
        self._count += 1
        while self._cur >= 0 and self._count > self._levels[self._cur].num_at_level:
            self._count = 1
            self._cur -= 1
        self.gain = self._levels[self._cur].gain if self._cur >= 0 else 0.0
        return self.gain


def _log2(value: float) -> float:
    if value > 0:
        return math.log2(value)
    if value == 0:
        return -math.inf
    return math.nan


def _retrieved(res_rels: ResRels) -> list[int]:
    return list(islice(res_rels.results_rel_list, res_rels.num_ret))


def r_ndcg(res_rels: ResRels, gain_params: GainParams = None) -> float:
    """nDCG averaged at each point where the ideal gain level changes.

    A final point is taken at the end of the retrieval when it runs past the
    last positive ideal gain. Returns 0.0 when the topic has no relevant docs
    and NaN when no averaging point exists.
    """
    gains = setup_gains(res_rels, gain_params)
    if res_rels.num_rel == 0:
        return 0.0

    retrieved = _retrieved(res_rels)
    ideal = _IdealWalk(gains)
    old_ideal_gain = ideal.gain
    results_dcg = 0.0
    ideal_dcg = 0.0
    total = 0.0
    num_points = 0

    def at_boundary() -> None:
        nonlocal total, num_points, old_ideal_gain
        if ideal.gain != old_ideal_gain:
            if ideal_dcg > 0.0:
                total += results_dcg / ideal_dcg
                num_points += 1
            old_ideal_gain = ideal.gain

    rank = 0
    while rank < len(retrieved) and ideal.gain > 0.0:
        results_gain = gains.gain_for(retrieved[rank])
        ideal.step()
        at_boundary()
        if results_gain != 0:
            results_dcg += results_gain / math.log2(rank + 2)
        if ideal.gain > 0.0:
            ideal_dcg += ideal.gain / math.log2(rank + 2)
        rank += 1

    if rank < len(retrieved):
        for later_rank in range(rank, len(retrieved)):
            results_gain = gains.gain_for(retrieved[later_rank])
            if results_gain != 0:
                results_dcg += results_gain / math.log2(later_rank + 2)
        rank = len(retrieved)
        if ideal_dcg > 0.0:
            total += results_dcg / ideal_dcg
            num_points += 1

    while ideal.gain > 0.0:
        ideal.step()
        at_boundary()
        if ideal.gain > 0.0:
            ideal_dcg += ideal.gain / math.log2(rank + 2)
        rank += 1

    return _ieee_div(total, num_points)


def g_measure(res_rels: ResRels, gain_params: GainParams = None) -> float:
    """Normalized gain G.

    A doc at rank i contributes gain(doc) / log2(2 + cost(i) - results_gain(i)),
    where cost follows the ideal gains (at least 1 per rank) and results_gain
    sums the gains retrieved so far. The total is normalized by the ideal gain;
    0.0 when there is no positive ideal gain.
    """
    gains = setup_gains(res_rels, gain_params)
    retrieved = _retrieved(res_rels)
    ideal = _IdealWalk(gains)
    results_g = 0.0
    sum_results = 0.0
    sum_ideal = 0.0
    sum_cost = 0.0

    def add_result(results_gain: float) -> None:
        nonlocal results_g
        if results_gain != 0:
            results_g += _ieee_div(results_gain, _log2(2 + sum_cost - sum_results))

    rank = 0
    while rank < len(retrieved) and ideal.gain > 0.0:
        results_gain = gains.gain_for(retrieved[rank])
        sum_results += results_gain
        ideal.step()
        if ideal.gain > 0.0:
            sum_ideal += ideal.gain
        sum_cost += ideal.gain if ideal.gain >= _MIN_COST else _MIN_COST
        add_result(results_gain)
        rank += 1

    for rel in retrieved[rank:]:
        results_gain = gains.gain_for(rel)
        sum_results += results_gain
        sum_cost += _MIN_COST
        add_result(results_gain)

    while ideal.gain > 0.0:
        ideal.step()
        if ideal.gain > 0.0:
            sum_ideal += ideal.gain

    if sum_ideal > 0.0:
        return results_g / sum_ideal
    return 0.0