"""
Prefect flow for building the popsicle chart from fetched data.

Loads cached daily values, runs the Hamilton DAG (classify → aggregate →
render) and writes the daily summary table and the PNG.

Run locally:
    python -m ice_popsicles.flows.build
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

import pandas as pd
from prefect import flow, task

from ice_popsicles.analysis.aggregate import summaries_to_records
from ice_popsicles.analysis.runner import run_dag
from ice_popsicles.config import get_settings
from ice_popsicles.flows.fetch import daily_values_path
from ice_popsicles.renderers.popsicles import ungridded_states
from ice_popsicles.schemas import DailyStateSummary
from ice_popsicles.store import DataStore

# Store and output paths
store = DataStore(get_settings().data_dir)
SUMMARY_PATH = Path("derived/daily_summary.json")
SUMMARY_CSV = "daily_summary.csv"


# =============================================================================
# Data loading tasks
# =============================================================================


@task(name="load-daily-values")
def load_daily_values(state_code: str, start: date, end: date) -> list[dict[str, Any]] | None:
    """Load one state's cached observation records from store."""
    records: list[dict[str, Any]] | None = store.read(daily_values_path(state_code, start, end))
    return records


# =============================================================================
# Build tasks and flow
# =============================================================================


@task(name="run-popsicle-dag")
def run_popsicle_dag(
    gage_rows: list[dict[str, Any]],
    start: date,
    end: date,
    output_path: Path,
    dpi: int,
) -> dict[str, Any]:
    """Classify, aggregate and render via the Hamilton DAG."""
    return run_dag(gage_rows, start, end, output_path, dpi=dpi)


@task(name="save-daily-summary")
def save_daily_summary(summaries: list[DailyStateSummary]) -> Path:
    """Save the daily summary table as a store envelope and a CSV."""
    records = summaries_to_records(summaries)
    json_path = store.write(SUMMARY_PATH, records, source="ice-popsicles")

    columns = list(DailyStateSummary.model_fields)
    csv_path = store.derived / SUMMARY_CSV
    pd.DataFrame.from_records(records, columns=columns).to_csv(csv_path, index=False)
    return json_path


@flow(name="build-popsicles", log_prints=True)
def build_all(
    states: list[str] | None = None,
    start: date | None = None,
    end: date | None = None,
    output_path: Path | None = None,
) -> dict[str, Any]:
    """
    Build the popsicle chart from cached daily values.

    This is the main Prefect flow that generates the PNG.
    """
    settings = get_settings()
    states = [s.upper() for s in (states or settings.states)]
    start = start or settings.start_date
    end = end or settings.end_date
    output_path = Path(output_path or settings.output_path)

    print(f"Loading daily values for {len(states)} states...")
    gage_rows: list[dict[str, Any]] = []
    missing_states: list[str] = []
    for state in states:
        records = load_daily_values(state, start, end)
        if records is None:
            missing_states.append(state)
            continue
        gage_rows.extend(records)

    if missing_states:
        print(f"Warning: no cached data for {', '.join(missing_states)}. Building without them.")

    if not gage_rows:
        print("No daily values found. Run fetch flow first.")
        return {"error": "no data"}

    print(f"Classifying and aggregating {len(gage_rows)} readings...")
    results = run_popsicle_dag(gage_rows, start, end, output_path, settings.dpi)
    summaries: list[DailyStateSummary] = results["daily_state_summary"]

    skipped = ungridded_states(summaries)
    if skipped:
        print(f"Warning: no grid position for {', '.join(skipped)}; not drawn.")

    print("Writing daily summary...")
    summary_path = save_daily_summary(summaries)

    image_path: Path = results["popsicle_image"]
    print(f"Popsicles built: {image_path}")
    return {
        "summaries": len(summaries),
        "sites": len(results["site_ids"]),
        "missing_states": missing_states,
        "summary": str(summary_path),
        "output": str(image_path),
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
