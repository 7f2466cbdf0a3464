"""Per-query relevance summaries and the simple counting measures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple


@dataclass(frozen=True)
class ResRels:
    """Relevance of each retrieved doc of a query plus summary counts.

    rel_levels[i] is the number of judged docs at relevance level i.
    """

    results_rel_list: Sequence[int] = ()
    num_ret: int = 0
    num_rel_ret: int = 0
    num_rel: int = 0
    num_nonpool: int = 0
    num_unjudged_in_pool: int = 0
    rel_levels: Sequence[int] = ()

    def num_rel_levels(self) -> int:
        """Number of distinct relevance levels counted in rel_levels."""
        return len(self.rel_levels)


@dataclass(frozen=True)
class ResRelsJg:
    """Relevance summaries of one query, one per judgment group."""

    jgs: Sequence[ResRels] = ()

    def num_jgs(self) -> int:
        """Number of judgment groups."""
        return len(self.jgs)


def num_ret(res_rels: ResRels) -> int:
    """Number of documents retrieved for the topic."""
    return res_rels.num_ret


def num_rel_ret(res_rels: ResRels) -> int:
    """Number of relevant documents retrieved for the topic."""
    return res_rels.num_rel_ret


def num_nonrel_judged_ret(res_rels: ResRels) -> int:
    """Number of judged non-relevant documents retrieved for the topic."""
    return (
        res_rels.num_ret
        - res_rels.num_nonpool
        - res_rels.num_unjudged_in_pool
        - res_rels.num_rel_ret
    )


def num_rel(res_rels: ResRels) -> int:
    """Number of relevant documents for the topic."""
    return res_rels.num_rel


def total_num_rel(query_rels: Iterable[Tuple[str, Iterable]]) -> int:
    """Count relevant judgments (rel > 0) over all queries.

    Each item is (rel_format, judgments): for "qrels" the judgments are
    relevance values; for "qrels_jg" they are groups of relevance values.
    """
    count = 0
    for rel_format, judgments in query_rels:
        if rel_format == "qrels":
            count += sum(1 for rel in judgments if rel > 0)
        elif rel_format == "qrels_jg":
            count += sum(1 for group in judgments for rel in group if rel > 0)
        else:
            raise ValueError(
                f"rel_info format {rel_format!r} not qrels or qrels_jg"
            )
    return count


def num_q_average(num_queries: int, num_rel_queries: int, average_complete: bool) -> int:
    """Number of topics averaged over.

    With average_complete, every topic in the relevance info counts.
    """
    return num_rel_queries if average_complete else num_queries