"""Recursive division.

Starts from an open interior with a closed outer boundary and keeps splitting
rectangular regions with a wall line that has exactly one passage. Regions
narrower than two cells in either dimension are left as open corridors.

Wall lines are written through ``Grid.add_wall`` so both cells sharing each
wall are updated. Pending regions sit on an explicit work stack rather than
the Python call stack.
"""

from __future__ import annotations

import random
from typing import List, Tuple

from ..grid import Grid
from ..sides import BOTTOM, RIGHT

HORIZONTAL = "horizontal"  # wall line runs between two rows
VERTICAL = "vertical"  # wall line runs between two columns

Region = Tuple[int, int, int, int]


def choose_orientation(width: int, height: int, rng: random.Random) -> str:
    if width < height:
        return HORIZONTAL
    if height < width:
        return VERTICAL
    return HORIZONTAL if rng.random() < 0.5 else VERTICAL


def _divide(grid: Grid, region: Region, rng: random.Random) -> List[Region]:
    x, y, width, height = region
    if width < 2 or height < 2:
        return []
    if choose_orientation(width, height, rng) == HORIZONTAL:
        wy = y + rng.randrange(height - 1)
        px = x + rng.randrange(width)
        for cx in range(x, x + width):
            if cx != px:
                grid.add_wall(cx, wy, BOTTOM)
        return [(x, y, width, wy + 1 - y), (x, wy + 1, width, y + height - wy - 1)]
    wx = x + rng.randrange(width - 1)
    py = y + rng.randrange(height)
    for cy in range(y, y + height):
        if cy != py:
            grid.add_wall(wx, cy, RIGHT)
    return [(x, y, wx + 1 - x, height), (wx + 1, y, x + width - wx - 1, height)]


def generate_recursive_division(grid: Grid, rng: random.Random) -> None:
    grid.clear_interior()
    pending: List[Region] = [(0, 0, grid.width, grid.height)]
    while pending:
        region = pending.pop()
        # reversed so the first sub-region is divided first
        pending.extend(reversed(_divide(grid, region, rng)))


__all__ = ["generate_recursive_division", "choose_orientation", "HORIZONTAL", "VERTICAL"]
