"""Retrieval evaluation measures computed from ranked results and relevance judgments."""

__version__ = "0.1.0"

__all__ = [
    "averages",
    "binary_gain",
    "judged",
    "ndcg",
    "ndcg_cut",
    "ndcg_levels",
    "precision",
    "prefs",
    "prefs_variants",
    "relinfo",
    "rprecision",
]