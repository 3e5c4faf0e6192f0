"""Breadth-first shortest-path solver.

Neighbors are expanded in the fixed order up, right, down, left; when several
shortest paths exist that order decides which one is returned.

By default a safety cutoff aborts the search once more than 80% of the grid
has been visited without reaching the goal, bounding work on disconnected
grids. The goal of a perfect maze is frequently one of the farthest cells from
the start, so the cutoff can also fire on valid mazes; callers that need a
complete search (the pipeline, the web API) pass ``cutoff_ratio=None``.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional, Tuple

from ..logging_utils import get_logger
from .cells import Coord2D, Path
from .grid import Grid

VISITED_CUTOFF_RATIO = 0.8

_log = get_logger("maze.solver")


def solve(
    grid: Grid,
    start: Optional[Coord2D] = None,
    goal: Optional[Coord2D] = None,
    cutoff_ratio: Optional[float] = VISITED_CUTOFF_RATIO,
) -> Path:
    """Return the shortest path from start to goal, or an empty tuple."""
    start = start if start is not None else grid.start
    goal = goal if goal is not None else grid.goal
    if not (grid.in_bounds(*start) and grid.in_bounds(*goal)):
        raise ValueError(f"start {start} / goal {goal} outside {grid.width}x{grid.height} grid")
    limit = grid.size * cutoff_ratio if cutoff_ratio is not None else None
    q: Deque[Tuple[Coord2D, Path]] = deque([(start, (start,))])
    seen = {start}
    while q:
        cur, path = q.popleft()
        if cur == goal:
            return path
        if limit is not None and len(seen) > limit:
            _log.warn(event="solve_cutoff", visited=len(seen), total=grid.size, width=grid.width, height=grid.height)
            break
        for n in grid.open_neighbors(*cur):
            if n in seen:
                continue
            seen.add(n)
            q.append((n, path + (n,)))
    return ()


__all__ = ["solve", "VISITED_CUTOFF_RATIO"]
