"""Shared helpers for maze tests: hand-carved grids with known shapes."""

from labyrinth.maze.grid import Grid
from labyrinth.maze.sides import BOTTOM, RIGHT

ALL_ALGORITHMS = (
    "recursive-backtracking",
    "binary-tree",
    "eller",
    "prim",
    "recursive-division",
)


def corridor_grid(width, height):
    """Open the top row left->right then the right column top->bottom."""
    grid = Grid.create(width, height)
    for x in range(width - 1):
        grid.remove_wall(x, 0, RIGHT)
    for y in range(height - 1):
        grid.remove_wall(width - 1, y, BOTTOM)
    return grid


def serpentine_grid(width, height):
    """Boustrophedon corridor visiting every cell.

    Even rows run left->right and drop at the right edge; odd rows run
    right->left and drop at the left edge. With an odd height the goal is the
    last cell of the corridor.
    """
    grid = Grid.create(width, height)
    for y in range(height):
        for x in range(width - 1):
            grid.remove_wall(x, y, RIGHT)
        if y < height - 1:
            drop_x = width - 1 if y % 2 == 0 else 0
            grid.remove_wall(drop_x, y, BOTTOM)
    return grid


def open_edges(grid):
    """Return the set of undirected open passages as frozensets of two cells."""
    edges = set()
    for x, y in grid.coords():
        for n in grid.open_neighbors(x, y):
            edges.add(frozenset(((x, y), n)))
    return edges


def wall_snapshot(grid):
    return [[grid.cells[x][y].walls() for y in range(grid.height)] for x in range(grid.width)]


def is_adjacent_path(path):
    return all(abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1 for a, b in zip(path, path[1:]))


__all__ = [
    "ALL_ALGORITHMS",
    "corridor_grid",
    "serpentine_grid",
    "open_edges",
    "wall_snapshot",
    "is_adjacent_path",
]
