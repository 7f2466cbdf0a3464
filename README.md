# treceval

Evaluation measures for ranked retrieval results. Each measure is a plain
function computed for one query from the relevance of its retrieved documents
and a summary of its relevance judgments.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Describing a query

Most measures take a `treceval.relinfo.ResRels`, a frozen dataclass with:

- `results_rel_list`: relevance value of each retrieved document, in rank
  order. `-1` (`treceval.judged.RELVALUE_NONPOOL`) marks a document outside
  the judgment pool, `-2` (`treceval.judged.RELVALUE_UNJUDGED`) one in the
  pool but not judged.
- `num_ret`, `num_rel_ret`, `num_rel`, `num_nonpool`, `num_unjudged_in_pool`.
- `rel_levels`: `rel_levels[i]` is the number of judged documents at
  relevance level `i`.

Measures averaged over judgment groups (one set of judgments per user) take a
`treceval.relinfo.ResRelsJg`, whose `jgs` holds one `ResRels` per group.

```python
from treceval.relinfo import ResRels
from treceval.precision import precision_at
from treceval.averages import average_precision

rr = ResRels(
    results_rel_list=[1, 0, 1],
    num_ret=3,
    num_rel_ret=2,
    num_rel=3,
    rel_levels=[5, 3],
)
precision_at(rr, [1, 2, 5], 1)   # [1.0, 0.5, 0.4]
average_precision(rr)            # (1/1 + 2/3) / 3
```

A document counts as relevant when its value is at least `relevance_level`
(default 1 where the function has a default).

## Modules

- `treceval.relinfo`: `ResRels`, `ResRelsJg` and the counts `num_ret`,
  `num_rel_ret`, `num_nonrel_judged_ret`, `num_rel`. `total_num_rel` counts
  judgments with relevance above 0 over `("qrels", values)` or
  `("qrels_jg", groups)` items and raises `ValueError` for any other format;
  `num_q_average` picks the number of topics to average over.
- `treceval.precision`: `precision_at` and `precision_at_avgjg`. Cutoffs must
  be positive and free of duplicates (`ValueError` otherwise); documents past
  the end of the retrieval count as non-relevant.
- `treceval.rprecision`: `r_precision`, `r_precision_mult`,
  `r_precision_mult_avgjg` (precision at multiples of R, default
  0.2, 0.4, ... 2.0).
- `treceval.averages`: `average_precision`, `average_precision_avgjg`,
  `average_precision_at`, `gm_average_precision` (log of AP floored at
  0.00001), `interpolated_precision_at_recall` and `eleven_point_average`
  (default recall points 0.0, 0.1, ... 1.0; an empty list raises
  `ValueError`).
- `treceval.judged`: `bpref`, `gm_bpref`, `inferred_ap`, which use only judged
  documents.
- `treceval.binary_gain`: `binary_g`.
- `treceval.ndcg`: `ndcg`, `ndcg_p`, `ndcg_rel`. Gains default to the
  relevance level and may be overridden with a mapping or pairs from a
  relevance level (as text, e.g. `"2"`) to a gain, for example
  `ndcg(rr, {"1": 3.5, "2": 9.0})`. `setup_gains` returns the resulting
  `Gains` (a tuple of `RelGain` sorted by gain) with `gain_for` and
  `total_num_at_levels`.
- `treceval.ndcg_cut`: `ndcg_cut` at document cutoffs, with the relevance
  values as gains.
- `treceval.ndcg_levels`: `r_ndcg` (nDCG averaged where the ideal gain level
  changes) and the normalized gain `g_measure`; both take the same gain
  parameters as `ndcg`.
- `treceval.prefs`: the preference data classes `EquivalenceClass`,
  `PrefsArray`, `JudgmentGroup`, `ResultsPrefs`, and the measures
  `prefs_avgjg` and `prefs_avgjg_ret`.
- `treceval.prefs_variants`: `prefs_avgjg_imp`, `prefs_avgjg_rnonrel`,
  `prefs_avgjg_rnonrel_ret`.

## What it does not do

The package only computes measures from the summaries above. It has no
command-line tool, does not read qrels, preference or result files, does not
build `ResRels` or `ResultsPrefs` from them, does not read reference
mean/standard-deviation files for z-scores, and does not average or print
results across queries; the caller does that.