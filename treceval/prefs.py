"""Preference-judgment data and the averaged-over-judgment-group prefs measures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class EquivalenceClass:
    """Docs judged equally relevant, given by their retrieval ranks."""

    rel_level: float
    docid_ranks: Sequence[int] = ()

    @property
    def num_in_ec(self) -> int:
        """Number of docs in the class."""
        return len(self.docid_ranks)


@dataclass(frozen=True)
class PrefsArray:
    """Square matrix: array[i][j] is true when doc i is preferred to doc j."""

    array: Sequence[Sequence[int]] = ()

    @property
    def num_judged(self) -> int:
        """Number of judged docs the matrix covers."""
        return len(self.array)


@dataclass(frozen=True)
class JudgmentGroup:
    """Preference counts and judgments of one judgment group (user)."""

    num_prefs_fulfilled_ret: int = 0
    num_prefs_possible_ret: int = 0
    num_prefs_fulfilled_imp: int = 0
    num_prefs_possible_imp: int = 0
    num_prefs_possible_notoccur: int = 0
    num_nonrel: int = 0
    num_nonrel_ret: int = 0
    num_rel: int = 0
    num_rel_ret: int = 0
    ecs: Sequence[EquivalenceClass] = ()
    prefs_array: PrefsArray = PrefsArray()
    rel_array: Sequence[float] = ()

    @property
    def num_ecs(self) -> int:
        """Number of equivalence classes."""
        return len(self.ecs)


@dataclass(frozen=True)
class ResultsPrefs:
    """Preference counts of one query, one entry per judgment group."""

    jgs: Sequence[JudgmentGroup] = ()
    num_judged_ret: int = 0

    @property
    def num_jgs(self) -> int:
        """Number of judgment groups."""
        return len(self.jgs)


def _average_ratio(results_prefs: ResultsPrefs, ratios) -> float:
    total = sum(ratios)
    if total > 0.0:
        return total / results_prefs.num_jgs
    return 0.0


def prefs_avgjg(results_prefs: ResultsPrefs) -> float:
    """Fulfilled over possible preferences per group, averaged over groups.

    Implied preferences count, and pairs with neither doc retrieved count as
    failures. Groups with no possible preferences add nothing but still count.
    """

    def ratios():
        for jg in results_prefs.jgs:
            ful = jg.num_prefs_fulfilled_ret + jg.num_prefs_fulfilled_imp
            poss = (
                jg.num_prefs_possible_ret
                + jg.num_prefs_possible_imp
                + jg.num_prefs_possible_notoccur
            )
            if poss:
                yield ful / poss

    return _average_ratio(results_prefs, ratios())


def prefs_avgjg_ret(results_prefs: ResultsPrefs) -> float:
    """Like prefs_avgjg, but only pairs with both docs retrieved count."""

    def ratios():
        for jg in results_prefs.jgs:
            if jg.num_prefs_possible_ret:
                yield jg.num_prefs_fulfilled_ret / jg.num_prefs_possible_ret

    return _average_ratio(results_prefs, ratios())