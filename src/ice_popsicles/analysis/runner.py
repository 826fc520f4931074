"""Build and execute the Hamilton driver over ``analysis/dag.py``."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from pathlib import Path
from typing import Any

from hamilton import base, driver

from ice_popsicles.analysis import dag
from ice_popsicles.reference.window import DEFAULT_DPI

DEFAULT_FINAL_VARS = ["daily_state_summary", "site_ids", "popsicle_image"]


def build_driver() -> driver.Driver:
    """Driver over the build DAG, returning results as a plain dict."""
    return driver.Driver({}, dag, adapter=base.SimplePythonGraphAdapter(base.DictResult()))


def run_dag(
    gage_rows: list[dict[str, Any]],
    start_date: date,
    end_date: date,
    output_path: Path,
    dpi: int = DEFAULT_DPI,
    final_vars: list[str] | None = None,
) -> dict[str, Any]:
    """
    Execute the build DAG.

    Args:
        gage_rows: Observation records (as cached by the fetch flow).
        start_date: First day of the window.
        end_date: Last day of the window.
        output_path: PNG destination (overwritten).
        dpi: PNG raster density.
        final_vars: Nodes to compute; defaults to summary, site ids and image.

    Returns:
        Dict of node name -> value for each requested node.
    """
    dr = build_driver()
    result: dict[str, Any] = dr.execute(
        final_vars or DEFAULT_FINAL_VARS,
        inputs={
            "gage_rows": gage_rows,
            "start_date": start_date,
            "end_date": end_date,
            "output_path": Path(output_path),
            "dpi": dpi,
        },
    )
    return result
