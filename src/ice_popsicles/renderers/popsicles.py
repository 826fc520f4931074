"""Popsicle small multiples: one bar chart per state on the state grid.

Each state's panel is a bar per day (height = percent of gages not ice
affected) sitting on a wooden "stem" centred on the middle of the window,
with the state code written on the stem.
"""

from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib

matplotlib.use("Agg")

import matplotlib.dates as mdates  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

from ice_popsicles.analysis.aggregate import summaries_by_state  # noqa: E402
from ice_popsicles.reference.state_grid import STATE_GRID, GridCell, grid_shape  # noqa: E402
from ice_popsicles.reference.window import (  # noqa: E402
    DEFAULT_DPI,
    IMAGE_SIZE_IN,
    LABEL_Y,
    STEM_BOTTOM,
    STEM_WIDTH_DAYS,
    X_PAD_DAYS,
    Y_LIMITS,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from ice_popsicles.schemas import DailyStateSummary

ICE_COLOR = "#8fd3f4"
STEM_COLOR = "#d9b382"
LABEL_COLOR = "#5a3e1b"


def midpoint_date(start: date, end: date) -> date:
    """Mean of two dates, floored to a whole day."""
    return start + timedelta(days=(end - start).days // 2)


def ungridded_states(
    summaries: Iterable[DailyStateSummary],
    grid: dict[str, GridCell] = STATE_GRID,
) -> list[str]:
    """State codes with data but no grid position (these are not drawn)."""
    return sorted({s.state_code for s in summaries} - set(grid))


def _draw_popsicle(
    ax: Axes,
    state_code: str,
    rows: list[DailyStateSummary],
    start: date,
    end: date,
    midpoint: date,
) -> None:
    ax.set_axis_on()
    ax.bar(
        [s.date for s in rows],
        [s.percent_not_ice for s in rows],
        width=1.0,
        color=ICE_COLOR,
        linewidth=0,
    )

    stem_left = mdates.date2num(midpoint - timedelta(days=STEM_WIDTH_DAYS / 2))
    ax.add_patch(
        Rectangle(
            (stem_left, STEM_BOTTOM),
            STEM_WIDTH_DAYS,
            -STEM_BOTTOM,
            facecolor=STEM_COLOR,
            edgecolor="none",
        )
    )
    ax.text(
        mdates.date2num(midpoint),
        LABEL_Y,
        state_code,
        ha="center",
        va="center",
        fontsize=6,
        fontweight="bold",
        color=LABEL_COLOR,
    )

    pad = timedelta(days=X_PAD_DAYS)
    ax.set_xlim(mdates.date2num(start - pad), mdates.date2num(end + pad))
    ax.set_ylim(*Y_LIMITS)
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)


def build_popsicle_figure(
    summaries: Iterable[DailyStateSummary],
    start: date,
    end: date,
    midpoint: date | None = None,
    grid: dict[str, GridCell] = STATE_GRID,
) -> Figure:
    """
    Draw one popsicle per state, placed by the static state grid.

    Args:
        summaries: Daily per-state summaries (any order).
        start: First day of the window.
        end: Last day of the window.
        midpoint: Stem centre; defaults to the middle of the window.
        grid: State code -> grid cell. States missing from it are skipped.

    Returns:
        A 10 x 10 inch figure. Grid cells without data stay blank.
    """
    n_rows, n_cols = grid_shape(grid)
    fig, axes = plt.subplots(
        max(n_rows, 1), max(n_cols, 1), figsize=IMAGE_SIZE_IN, squeeze=False
    )
    for ax in axes.flat:
        ax.set_axis_off()

    if midpoint is None:
        midpoint = midpoint_date(start, end)
    for state_code, rows in summaries_by_state(summaries).items():
        cell = grid.get(state_code)
        if cell is None:
            continue
        _draw_popsicle(axes[cell.row][cell.col], state_code, rows, start, end, midpoint)

    fig.subplots_adjust(left=0.01, right=0.99, bottom=0.01, top=0.99, wspace=0.05, hspace=0.05)
    return fig


def save_popsicle_image(fig: Figure, path: Path, dpi: int = DEFAULT_DPI) -> Path:
    """Write the figure as PNG, replacing any existing file, and close it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        fig.savefig(path, dpi=dpi, format="png")
    finally:
        plt.close(fig)
    return path
