"""Normalized discounted cumulative gain with configurable per-level gains.

Gains default to the relevance level itself and can be overridden by
parameters mapping a relevance level (given as text, e.g. ``"2"``) to a gain.
"""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from itertools import accumulate, islice
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from .relinfo import ResRels

GainParams = Union[Mapping[object, float], Iterable[Tuple[object, float]], None]

_LONG_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


@dataclass(frozen=True)
class RelGain:
    """Gain of one relevance level and how many judged docs sit at it."""

    rel_level: int
    num_at_level: int
    gain: float


@dataclass(frozen=True)
class Gains:
    """Relevance-level gains sorted by increasing gain."""

    rel_gains: Tuple[RelGain, ...] = ()

    def gain_for(self, rel_level: int) -> float:
        """Gain of the first entry for rel_level, or 0.0 if it has none."""
        return next(
            (rg.gain for rg in self.rel_gains if rg.rel_level == rel_level), 0.0
        )

    def total_num_at_levels(self) -> int:
        """Total number of judged docs over all levels."""
        return sum(rg.num_at_level for rg in self.rel_gains)

    def ideal_gains(self) -> Iterator[float]:
        """Gains of an ideal ranking, highest first, ending at the first gain <= 0."""
        for rg in reversed(self.rel_gains):
            if rg.num_at_level == 0:
                continue
            if rg.gain <= 0.0:
                return
            for _ in range(rg.num_at_level):
                yield rg.gain


def _atol(text: object) -> int:
    match = _LONG_PREFIX.match(str(text))
    return int(match.group(1)) if match else 0


def _pairs(gain_params: GainParams) -> list[tuple[object, float]]:
    if gain_params is None:
        return []
    if isinstance(gain_params, Mapping):
        return list(gain_params.items())
    return [(name, value) for name, value in gain_params]


def setup_gains(res_rels: ResRels, gain_params: GainParams = None) -> Gains:
    """Combine gain parameters with the relevance levels seen in the judgments."""
    entries = [
        [_atol(name), 0, float(value)] for name, value in _pairs(gain_params)
    ]
    for level, count in enumerate(res_rels.rel_levels):
        match = next((entry for entry in entries if entry[0] == level), None)
        if match is not None:
            match[1] = count
        else:
            entries.append([level, count, float(level)])
    entries.sort(key=lambda entry: entry[2])
    return Gains(tuple(RelGain(level, count, gain) for level, count, gain in entries))


def _ieee_div(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _retrieved(res_rels: ResRels) -> Iterable[int]:
    return islice(res_rels.results_rel_list, res_rels.num_ret)


def ndcg(res_rels: ResRels, gain_params: GainParams = None) -> float:
    """Traditional nDCG over the whole retrieval; 0.0 when the ideal DCG is 0."""
    gains = setup_gains(res_rels, gain_params)
    results_dcg = 0.0
    for rank, rel in enumerate(_retrieved(res_rels)):
        gain = gains.gain_for(rel)
        if gain != 0:
            results_dcg += gain / math.log2(rank + 2)
    ideal_dcg = sum(
        gain / math.log2(rank + 2) for rank, gain in enumerate(gains.ideal_gains())
    )
    if ideal_dcg > 0.0:
        return results_dcg / ideal_dcg
    return 0.0


def ndcg_p(res_rels: ResRels, gain_params: GainParams = None) -> float:
    """nDCG with the first rank undiscounted and rank i discounted by log2(i).

    Returns 0.0 when no relevant doc is retrieved.
    """
    gains = setup_gains(res_rels, gain_params)
    results_dcg = 0.0
    for rank, rel in enumerate(_retrieved(res_rels)):
        gain = gains.gain_for(rel)
        if gain != 0:
            results_dcg += gain if rank == 0 else gain / math.log2(rank + 1)
    ideal_dcg = 0.0
    for rank, gain in enumerate(gains.ideal_gains()):
        if rank == 0:
            ideal_dcg += gain
        else:
            ideal_dcg += gain / _to_float32(math.log2(rank + 1))
    if res_rels.num_rel_ret > 0:
        return _ieee_div(results_dcg, ideal_dcg)
    return 0.0


def ndcg_rel(res_rels: ResRels, gain_params: Optional[GainParams] = None) -> float:
    """nDCG averaged over relevant docs (ideal gain > 0).

    A relevant doc not retrieved contributes the final DCG over the ideal DCG.
    """
    gains = setup_gains(res_rels, gain_params)
    ideal = list(gains.ideal_gains())
    ideal_prefix = list(
        accumulate(
            (gain / math.log2(rank + 2) for rank, gain in enumerate(ideal)),
            initial=0.0,
        )
    )
    num_rel = len(ideal)

    total = 0.0
    num_rel_ret = 0
    results_dcg = 0.0
    for rank, rel in enumerate(_retrieved(res_rels)):
        gain = gains.gain_for(rel)
        if gain != 0:
            results_dcg += gain / math.log2(rank + 2)
        if gain > 0:
            total += _ieee_div(results_dcg, ideal_prefix[min(rank + 1, num_rel)])
            num_rel_ret += 1

    total += _ieee_div((num_rel - num_rel_ret) * results_dcg, ideal_prefix[num_rel])
    if total > 0.0:
        return _ieee_div(total, num_rel)
    return 0.0