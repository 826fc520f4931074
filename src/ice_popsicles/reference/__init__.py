"""Static reference data.

Tables and constants that don't change with API calls: the state grid
layout, the winter date window and the popsicle plot geometry.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from ice_popsicles.reference.state_grid import ALL_STATES as ALL_STATES
from ice_popsicles.reference.state_grid import STATE_GRID as STATE_GRID
from ice_popsicles.reference.state_grid import GridCell as GridCell
from ice_popsicles.reference.state_grid import grid_shape as grid_shape
