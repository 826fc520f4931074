"""Static US state grid layout.

A row/column seating chart that approximates the real arrangement of the
states, used to place one small multiple per state.  Row 0 is the top of the
figure, column 0 the left edge.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridCell:
    """Position of one state in the grid."""

    row: int
    col: int


STATE_GRID: dict[str, GridCell] = {
    "AK": GridCell(0, 0),
    "ME": GridCell(0, 11),
    "VT": GridCell(1, 10),
    "NH": GridCell(1, 11),
    "WA": GridCell(2, 1),
    "ID": GridCell(2, 2),
    "MT": GridCell(2, 3),
    "ND": GridCell(2, 4),
    "MN": GridCell(2, 5),
    "IL": GridCell(2, 6),
    "WI": GridCell(2, 7),
    "MI": GridCell(2, 8),
    "NY": GridCell(2, 9),
    "RI": GridCell(2, 10),
    "MA": GridCell(2, 11),
    "OR": GridCell(3, 1),
    "NV": GridCell(3, 2),
    "WY": GridCell(3, 3),
    "SD": GridCell(3, 4),
    "IA": GridCell(3, 5),
    "IN": GridCell(3, 6),
    "OH": GridCell(3, 7),
    "PA": GridCell(3, 8),
    "NJ": GridCell(3, 9),
    "CT": GridCell(3, 10),
    "CA": GridCell(4, 1),
    "UT": GridCell(4, 2),
    "CO": GridCell(4, 3),
    "NE": GridCell(4, 4),
    "MO": GridCell(4, 5),
    "KY": GridCell(4, 6),
    "WV": GridCell(4, 7),
    "VA": GridCell(4, 8),
    "MD": GridCell(4, 9),
    "DE": GridCell(4, 10),
    "AZ": GridCell(5, 2),
    "NM": GridCell(5, 3),
    "KS": GridCell(5, 4),
    "AR": GridCell(5, 5),
    "TN": GridCell(5, 6),
    "NC": GridCell(5, 7),
    "SC": GridCell(5, 8),
    "DC": GridCell(5, 9),
    "OK": GridCell(6, 4),
    "LA": GridCell(6, 5),
    "MS": GridCell(6, 6),
    "AL": GridCell(6, 7),
    "GA": GridCell(6, 8),
    "HI": GridCell(7, 0),
    "TX": GridCell(7, 4),
    "FL": GridCell(7, 9),
}

#: Every state code in the grid, in row-major order.
ALL_STATES: list[str] = sorted(
    STATE_GRID, key=lambda code: (STATE_GRID[code].row, STATE_GRID[code].col)
)


def grid_shape(grid: dict[str, GridCell] = STATE_GRID) -> tuple[int, int]:
    """Return ``(n_rows, n_cols)`` needed to hold every cell of ``grid``."""
    if not grid:
        return (0, 0)
    return (
        max(cell.row for cell in grid.values()) + 1,
        max(cell.col for cell in grid.values()) + 1,
    )
