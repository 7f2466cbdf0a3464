"""Averaged-over-judgment-group prefs measures: implied-only and R-nonrel forms."""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, Iterable, Iterator, Sequence

from .ndcg import _ieee_div
from .prefs import JudgmentGroup, ResultsPrefs, _average_ratio


def prefs_avgjg_imp(results_prefs: ResultsPrefs) -> float:
    """Fulfilled over possible preferences per group, averaged over groups.

    Implied preferences count, but pairs with neither doc retrieved are
    ignored. Groups with no possible preferences add nothing but still count.
    """

    def ratios() -> Iterator[float]:
        for jg in results_prefs.jgs:
            ful = jg.num_prefs_fulfilled_ret + jg.num_prefs_fulfilled_imp
            poss = jg.num_prefs_possible_ret + jg.num_prefs_possible_imp
            if poss:
                yield ful / poss

    return _average_ratio(results_prefs, ratios())


def _first_discarded_nonrel(jg: JudgmentGroup, scan_limit: int) -> int:
    """Index of the nonrel doc after the first num_rel ones, or scan_limit."""
    seen = 0
    for i in range(scan_limit):
        if jg.rel_array[i] == 0.0:
            seen += 1
            if seen == jg.num_rel + 1:
                return i
    return scan_limit


def _array_counts(
    jg: JudgmentGroup, num_judged_ret: int, scan_limit: int, implied: bool
) -> tuple[int, int]:
    """Fulfilled and possible preferences from the preference matrix.

    Nonrel docs past the first num_rel of them are left out. With implied,
    pairs where one or neither doc is retrieved count as well.
    """
    a = jg.prefs_array.array
    num_judged = jg.prefs_array.num_judged
    first_discarded = _first_discarded_nonrel(jg, scan_limit)

    def kept(k: int) -> bool:
        return k < first_discarded or jg.rel_array[k] != 0.0

    def marked(i: int, columns: Iterable[int]) -> int:
        return sum(1 for j in columns if kept(j) and a[i][j])

    ful = 0
    poss = 0
    for i in filter(kept, range(num_judged_ret)):
        poss += marked(i, range(i))
        ful += marked(i, range(i + 1, num_judged_ret))
        if implied:
            ful += marked(i, range(num_judged_ret, num_judged))
    if implied:
        for i in filter(kept, range(num_judged_ret, num_judged)):
            poss += marked(i, range(num_judged_ret))
            poss += marked(i, range(num_judged_ret, num_judged))
    return ful, poss + ful


def _ec_counts(
    jg: JudgmentGroup,
    new_nonrel: Sequence[int],
    ranks: Callable[[Sequence[int]], Iterable[int]],
    fulfilled: Callable[[int, int], bool],
) -> tuple[int, int]:
    """Fulfilled and possible preferences from equivalence classes.

    The last class is replaced by new_nonrel when paired as the lower class.
    """
    ful = 0
    poss = 0

    def count(upper: Sequence[int], lower: Sequence[int]) -> None:
        nonlocal ful, poss
        for r1 in ranks(upper):
            for r2 in ranks(lower):
                if fulfilled(r1, r2):
                    ful += 1
                else:
                    poss += 1

    ecs = jg.ecs
    for ec1 in range(len(ecs)):
        for ec2 in range(ec1 + 1, len(ecs) - 1):
            count(ecs[ec1].docid_ranks, ecs[ec2].docid_ranks)
    for ec in ecs:
        count(ec.docid_ranks, new_nonrel)
    return ful, poss + ful


def _recalculate(jg: JudgmentGroup, num_judged_ret: int) -> tuple[int, int]:
    if jg.num_ecs > 0:
        new_nonrel = list(jg.ecs[-1].docid_ranks)[: jg.num_rel]
        return _ec_counts(
            jg,
            new_nonrel,
            list,
            lambda r1, r2: r1 < r2 and r1 < num_judged_ret,
        )
    return _array_counts(
        jg, num_judged_ret, jg.prefs_array.num_judged, implied=True
    )


def _recalculate_ret(jg: JudgmentGroup, num_judged_ret: int) -> tuple[int, int]:
    if jg.num_ecs > 0:
        new_nonrel = list(jg.ecs[-1].docid_ranks)[: jg.num_rel_ret]
        return _ec_counts(
            jg,
            new_nonrel,
            lambda ranks: takewhile(lambda rank: rank < num_judged_ret, ranks),
            lambda r1, r2: r1 < r2,
        )
    return _array_counts(jg, num_judged_ret, num_judged_ret, implied=False)


def prefs_avgjg_rnonrel(results_prefs: ResultsPrefs) -> float:
    """prefs_avgjg with each group's nonrelevant count set to its R.

    When a group has fewer nonrelevant docs N than relevant docs R, R - N
    fulfilled preferences per retrieved relevant doc are added; otherwise
    only the first R nonrelevant docs are used and the counts recomputed.
    """

    def ratios() -> Iterator[float]:
        for jg in results_prefs.jgs:
            r, n = jg.num_rel, jg.num_nonrel
            if r >= n:
                ful = (
                    jg.num_prefs_fulfilled_ret
                    + jg.num_prefs_fulfilled_imp
                    + jg.num_rel_ret * (r - n)
                )
                poss = (
                    jg.num_prefs_possible_ret
                    + jg.num_prefs_possible_imp
                    + jg.num_prefs_possible_notoccur
                    + jg.num_rel * (r - n)
                )
            else:
                ful, poss = _recalculate(jg, results_prefs.num_judged_ret)
            yield _ieee_div(ful, poss)

    return _average_ratio(results_prefs, ratios())


def prefs_avgjg_rnonrel_ret(results_prefs: ResultsPrefs) -> float:
    """prefs_avgjg_rnonrel restricted to pairs with both docs retrieved.

    R and N are the numbers of relevant and nonrelevant docs retrieved.
    """

    def ratios() -> Iterator[float]:
        for jg in results_prefs.jgs:
            r, n = jg.num_rel_ret, jg.num_nonrel_ret
            if r >= n:
                ful = jg.num_prefs_fulfilled_ret + jg.num_rel_ret * (r - n)
                poss = jg.num_prefs_possible_ret + jg.num_rel * (r - n)
            else:
                ful, poss = _recalculate_ret(jg, results_prefs.num_judged_ret)
            yield _ieee_div(ful, poss)

    return _average_ratio(results_prefs, ratios())