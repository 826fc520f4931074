"""Cross-step analysis: ice/flow classification and daily aggregation.

Modules:
  - classify: classify_observation, classify_observations, distinct_site_ids
  - aggregate: summarize_daily and (de)serialization helpers
  - dag: Hamilton node functions (classify → aggregate → render)
  - runner: build_driver, run_dag

Adding an analysis step
-----------------------
1. Write a pure function in ``classify.py``/``aggregate.py`` (or a new module).
2. Expose it as a node in ``dag.py``: a public function whose parameter names
   are the upstream node names.
3. Request it in ``runner.DEFAULT_FINAL_VARS`` or via ``final_vars=``.
"""

from ice_popsicles.analysis.aggregate import (
    summaries_by_state,
    summaries_from_records,
    summaries_to_records,
    summarize_daily,
)
from ice_popsicles.analysis.classify import (
    classify_observation,
    classify_observations,
    distinct_site_ids,
)

__all__ = [
    "classify_observation",
    "classify_observations",
    "distinct_site_ids",
    "summaries_by_state",
    "summaries_from_records",
    "summaries_to_records",
    "summarize_daily",
]
