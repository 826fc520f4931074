"""
Hamilton DAG for the build step.

Every public function here is a node; Hamilton wires them together by
parameter name.  External inputs (supplied at execute time):

    gage_rows    cached observation records for all states
    start_date   first day of the window
    end_date     last day of the window
    output_path  where the PNG goes
    dpi          raster density of the PNG

Graph::

    gage_rows → observations → classified_observations → daily_state_summary
                     │                                          │
                     └→ site_ids          plot_midpoint → popsicle_figure → popsicle_image

Annotations are resolved at graph-build time, so the types used in them are
imported at runtime.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

from matplotlib.figure import Figure

from ice_popsicles.analysis.aggregate import summarize_daily
from ice_popsicles.analysis.classify import classify_observations, distinct_site_ids
from ice_popsicles.renderers.popsicles import (
    build_popsicle_figure,
    midpoint_date,
    save_popsicle_image,
)
from ice_popsicles.schemas import ClassifiedObservation, DailyStateSummary, Observation


def observations(gage_rows: list[dict[str, Any]]) -> list[Observation]:
    """Validate cached records back into observations."""
    return [Observation.model_validate(row) for row in gage_rows]


def site_ids(observations: list[Observation]) -> list[str]:
    """Distinct gages seen across all states."""
    return distinct_site_ids(observations)


def classified_observations(observations: list[Observation]) -> list[ClassifiedObservation]:
    """Ice/flow label per reading; unusable readings dropped."""
    return classify_observations(observations)


def daily_state_summary(
    classified_observations: list[ClassifiedObservation],
) -> list[DailyStateSummary]:
    """Percent not ice per (state, date)."""
    return summarize_daily(classified_observations)


def plot_midpoint(start_date: date, end_date: date) -> date:
    """Centre of the window; the popsicle stem is centred here."""
    return midpoint_date(start_date, end_date)


def popsicle_figure(
    daily_state_summary: list[DailyStateSummary],
    start_date: date,
    end_date: date,
    plot_midpoint: date,
) -> Figure:
    """Popsicle small multiples laid out on the state grid."""
    return build_popsicle_figure(daily_state_summary, start_date, end_date, plot_midpoint)


def popsicle_image(popsicle_figure: Figure, output_path: Path, dpi: int) -> Path:
    """Write the chart; reruns overwrite the same file."""
    return save_popsicle_image(popsicle_figure, output_path, dpi=dpi)
