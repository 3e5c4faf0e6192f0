from __future__ import annotations

import random

from ..grid import Grid
from ..sides import RIGHT, TOP


def generate_binary_tree(grid: Grid, rng: random.Random) -> None:
    """Carve north or east from every cell.

    Always yields a perfect maze; the top row and right column end up as
    unbroken corridors, which is the expected bias of this algorithm.
    """
    last_col = grid.width - 1
    for x, y in grid.coords():
        options = []
        if y > 0:
            options.append(TOP)
        if x < last_col:
            options.append(RIGHT)
        if options:
            grid.remove_wall(x, y, rng.choice(options))


__all__ = ["generate_binary_tree"]
