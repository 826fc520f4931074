"""Per state/day share of gages reporting open-water flow."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from ice_popsicles.schemas import Condition, DailyStateSummary

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ice_popsicles.schemas import ClassifiedObservation


def summarize_daily(classified: Iterable[ClassifiedObservation]) -> list[DailyStateSummary]:
    """
    Group classified readings by (state, date) and compute percent not ice.

    ``percent_not_ice = round(100 * non_ice_count / total_count, 2)``.
    Groups only exist for dates with at least one reading, so
    ``total_count`` is never zero.

    Returns:
        Summaries sorted by state code, then date.
    """
    counts: dict[tuple[str, date], list[int]] = {}
    for obs in classified:
        total_and_flow = counts.setdefault((obs.state_code, obs.date), [0, 0])
        total_and_flow[0] += 1
        if obs.condition == Condition.FLOW:
            total_and_flow[1] += 1

    return [
        DailyStateSummary(
            state_code=state,
            date=day,
            total_count=total,
            non_ice_count=flow,
            percent_not_ice=round(100 * flow / total, 2),
        )
        for (state, day), (total, flow) in sorted(counts.items())
    ]


def summaries_by_state(
    summaries: Iterable[DailyStateSummary],
) -> dict[str, list[DailyStateSummary]]:
    """Split summaries into per-state lists, preserving order."""
    by_state: dict[str, list[DailyStateSummary]] = {}
    for s in summaries:
        by_state.setdefault(s.state_code, []).append(s)
    return by_state


def summaries_to_records(summaries: Iterable[DailyStateSummary]) -> list[dict[str, Any]]:
    """Serialize summaries to JSON-compatible dicts."""
    return [s.model_dump(mode="json") for s in summaries]


def summaries_from_records(records: Iterable[dict[str, Any]]) -> list[DailyStateSummary]:
    """Inverse of ``summaries_to_records``."""
    return [DailyStateSummary.model_validate(r) for r in records]
