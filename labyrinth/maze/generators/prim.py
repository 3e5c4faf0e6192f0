from __future__ import annotations

import random
from typing import List, Tuple

from ..grid import Grid
from ..sides import SIDES

# (x, y, side, nx, ny): the wall on `side` of (x, y) separating it from (nx, ny)
FrontierWall = Tuple[int, int, str, int, int]


def _push_walls(grid: Grid, x: int, y: int, frontier: List[FrontierWall], in_maze: List[List[bool]]) -> None:
    for side in SIDES:
        n = grid.neighbor(x, y, side)
        if n is not None and not in_maze[n[0]][n[1]]:
            frontier.append((x, y, side, n[0], n[1]))


def generate_prim(grid: Grid, rng: random.Random) -> None:
    """Randomized Prim's: grow a spanning tree from a random seed cell.

    A frontier wall is carved only when exactly one of its two cells is
    already part of the maze, which keeps the result acyclic.
    """
    in_maze = [[False] * grid.height for _ in range(grid.width)]
    sx, sy = rng.randrange(grid.width), rng.randrange(grid.height)
    in_maze[sx][sy] = True
    frontier: List[FrontierWall] = []
    _push_walls(grid, sx, sy, frontier, in_maze)
    while frontier:
        # swap-pop keeps the pick uniform without an O(n) list delete
        idx = rng.randrange(len(frontier))
        frontier[idx], frontier[-1] = frontier[-1], frontier[idx]
        x, y, side, nx, ny = frontier.pop()
        if in_maze[x][y] == in_maze[nx][ny]:
            continue
        grid.remove_wall(x, y, side)
        cx, cy = (nx, ny) if in_maze[x][y] else (x, y)
        in_maze[cx][cy] = True
        _push_walls(grid, cx, cy, frontier, in_maze)


__all__ = ["generate_prim"]
