"""Pure rendering functions: structured data -> matplotlib figures.

Renderers follow the same pattern:
  - Input: pydantic models from analysis/
  - Output: a ``matplotlib.figure.Figure``
  - No Prefect decorators; the only I/O is the explicit ``save_*`` helper

Used by analysis/dag.py, which the build flow executes.

Public API:
  - popsicles: build_popsicle_figure, save_popsicle_image, midpoint_date,
    ungridded_states
"""

from ice_popsicles.renderers.popsicles import (
    build_popsicle_figure,
    midpoint_date,
    save_popsicle_image,
    ungridded_states,
)

__all__ = [
    "build_popsicle_figure",
    "midpoint_date",
    "save_popsicle_image",
    "ungridded_states",
]
