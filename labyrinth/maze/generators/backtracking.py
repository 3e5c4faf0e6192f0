"""Recursive backtracking (randomized depth-first search).

Uses an explicit stack instead of recursion so large grids never approach the
interpreter recursion limit. The visited marker is a set local to one call.
"""

from __future__ import annotations

import random
from typing import List, Set

from ..cells import Coord2D
from ..grid import Grid
from ..sides import SIDES


def _unvisited_neighbors(grid: Grid, x: int, y: int, visited: Set[Coord2D]) -> List[Coord2D]:
    out = []
    for side in SIDES:
        n = grid.neighbor(x, y, side)
        if n is not None and n not in visited:
            out.append(n)
    return out


def generate_recursive_backtracking(grid: Grid, rng: random.Random) -> None:
    current = grid.start
    visited = {current}
    stack: List[Coord2D] = []
    while True:
        neighbors = _unvisited_neighbors(grid, current[0], current[1], visited)
        if neighbors:
            nxt = rng.choice(neighbors)
            stack.append(current)
            grid.remove_wall_between(current, nxt)
            visited.add(nxt)
            current = nxt
        elif stack:
            current = stack.pop()
        else:
            break


__all__ = ["generate_recursive_backtracking"]
