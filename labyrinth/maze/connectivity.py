"""Connectivity and structural validation utilities.

Pure query functions over a finished grid: flood-fill reachability, connected
component breakdown, outer boundary check, wall symmetry and structural
validation. Used by tests, the diagnostics report and the web API.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional, Set, Tuple
from .cells import Coord2D
from .grid import Grid
from .sides import SIDES

def flood_reachable(grid: Grid, start: Optional[Coord2D] = None) -> Set[Coord2D]:
    start = start if start is not None else grid.start
    visited = {start}
    stack = [start]
    while stack:
        cx,cy = stack.pop()
        for n in grid.open_neighbors(cx, cy):
            if n not in visited:
                visited.add(n); stack.append(n)
    return visited

def reachable_count(grid: Grid, start: Optional[Coord2D] = None) -> int:
    return len(flood_reachable(grid, start))

def connected_components(grid: Grid) -> List[Dict[str, Any]]:
    """Partition the grid into open-passage components, largest first.

    Each entry: {'cells': [(x,y)...], 'size': n, 'has_start': bool, 'has_goal': bool}.
    A perfect maze yields exactly one component.
    """
    seen: Set[Coord2D] = set()
    comps = []
    for x,y in grid.coords():
        if (x,y) in seen:
            continue
        cells = flood_reachable(grid, (x,y))
        seen |= cells
        comps.append({
            'cells': sorted(cells),
            'size': len(cells),
            'has_start': grid.start in cells,
            'has_goal': grid.goal in cells,
        })
    comps.sort(key=lambda c: c['size'], reverse=True)
    return comps

def check_boundaries(grid: Grid) -> Dict[str, bool]:
    w,h = grid.width, grid.height
    return {
        'top': all(grid.cells[x][0].top for x in range(w)),
        'right': all(grid.cells[w-1][y].right for y in range(h)),
        'bottom': all(grid.cells[x][h-1].bottom for x in range(w)),
        'left': all(grid.cells[0][y].left for y in range(h)),
    }

def boundaries_intact(grid: Grid) -> bool:
    return all(check_boundaries(grid).values())

def check_wall_symmetry(grid: Grid) -> List[Tuple[Coord2D, Coord2D]]:
    """Return adjacent pairs whose shared wall flags disagree."""
    bad = []
    w,h = grid.width, grid.height
    for x in range(w):
        for y in range(h):
            c = grid.cells[x][y]
            if x+1 < w and c.right != grid.cells[x+1][y].left:
                bad.append(((x,y),(x+1,y)))
            if y+1 < h and c.bottom != grid.cells[x][y+1].top:
                bad.append(((x,y),(x,y+1)))
    return bad

def validate_structure(grid: Grid) -> bool:
    """Every cell carries exactly the four wall flags, each a bool."""
    if len(grid.cells) != grid.width:
        return False
    for column in grid.cells:
        if len(column) != grid.height:
            return False
        for cell in column:
            for side in SIDES:
                if type(getattr(cell, side, None)) is not bool:
                    return False
    return True

def is_perfect(grid: Grid) -> bool:
    """Fully connected with exactly size-1 passages (a spanning tree)."""
    return reachable_count(grid) == grid.size and grid.passage_count() == grid.size - 1

def dead_end_count(grid: Grid) -> int:
    return sum(1 for x,y in grid.coords() if len(grid.open_neighbors(x,y)) == 1)

def check_maze(grid: Grid) -> Dict[str, Any]:
    """Bundle every query into one report (web API / diagnostics)."""
    reach = reachable_count(grid)
    bounds = check_boundaries(grid)
    return {
        'reachable': reach,
        'total': grid.size,
        'reachable_ratio': reach / grid.size,
        'boundaries': bounds,
        'boundaries_intact': all(bounds.values()),
        'symmetric': not check_wall_symmetry(grid),
        'valid': validate_structure(grid),
        'perfect': is_perfect(grid),
    }

__all__ = [
    'flood_reachable', 'reachable_count', 'connected_components', 'check_boundaries',
    'boundaries_intact', 'check_wall_symmetry', 'validate_structure', 'is_perfect',
    'dead_end_count', 'check_maze',
]
