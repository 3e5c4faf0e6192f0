"""Maze grid data model.

The grid is a column-major array of :class:`MazeCell` (``cells[x][y]``) with
every wall present on creation. All wall writes go through ``remove_wall`` /
``add_wall`` which always update both cells sharing the wall, so the
wall-symmetry invariant cannot be broken from outside this module.

Out-of-range coordinates, or a side that faces off the grid, are treated as a
caller bug and raise :class:`WallOperationError` instead of being ignored.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional

from .cells import Coord2D, Grid2D, MazeCell
from .sides import DELTAS, OPPOSITE, SIDES, side_for

MIN_DIMENSION = 2


class WallOperationError(IndexError):
    """Raised when a wall operation targets a cell or neighbor outside the grid."""


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < MIN_DIMENSION:
        raise ValueError(f"{name} must be >= {MIN_DIMENSION}, got {value}")
    return value


class Grid:
    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int):
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", height)
        self.cells: Grid2D = [[MazeCell() for _ in range(self.height)] for _ in range(self.width)]

    @classmethod
    def create(cls, width: int, height: int) -> "Grid":
        """Return a fully walled grid."""
        return cls(width, height)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def start(self) -> Coord2D:
        return (0, 0)

    @property
    def goal(self) -> Coord2D:
        return (self.width - 1, self.height - 1)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> MazeCell:
        if not self.in_bounds(x, y):
            raise WallOperationError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.cells[x][y]

    def has_wall(self, x: int, y: int, side: str) -> bool:
        return getattr(self.cell(x, y), side)

    def coords(self) -> Iterator[Coord2D]:
        """Yield every coordinate in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def neighbor(self, x: int, y: int, side: str) -> Optional[Coord2D]:
        dx, dy = DELTAS[side]
        nx, ny = x + dx, y + dy
        return (nx, ny) if self.in_bounds(nx, ny) else None

    # ------------------------------------------------------------------
    # Wall writes (always paired)
    # ------------------------------------------------------------------
    def _pair(self, x: int, y: int, side: str):
        if side not in DELTAS:
            raise ValueError(f"unknown side: {side!r}")
        if not self.in_bounds(x, y):
            raise WallOperationError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        other = self.neighbor(x, y, side)
        if other is None:
            raise WallOperationError(f"no neighbor {side} of ({x}, {y}); outer boundary walls are fixed")
        return self.cells[x][y], self.cells[other[0]][other[1]]

    def remove_wall(self, x: int, y: int, side: str) -> None:
        here, there = self._pair(x, y, side)
        setattr(here, side, False)
        setattr(there, OPPOSITE[side], False)

    def add_wall(self, x: int, y: int, side: str) -> None:
        here, there = self._pair(x, y, side)
        setattr(here, side, True)
        setattr(there, OPPOSITE[side], True)

    def remove_wall_between(self, a: Coord2D, b: Coord2D) -> None:
        (ax, ay), (bx, by) = a, b
        for side, (dx, dy) in DELTAS.items():
            if (ax + dx, ay + dy) == (bx, by):
                self.remove_wall(ax, ay, side)
                return
        raise WallOperationError(f"cells {a} and {b} are not adjacent")

    def clear_interior(self) -> None:
        """Open every interior wall, keeping the outer boundary closed."""
        for x in range(self.width):
            for y in range(self.height):
                c = self.cells[x][y]
                c.top = y == 0
                c.right = x == self.width - 1
                c.bottom = y == self.height - 1
                c.left = x == 0

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------
    def can_move(self, x: int, y: int, direction: str) -> bool:
        side = side_for(direction)
        if not self.in_bounds(x, y) or self.neighbor(x, y, side) is None:
            return False
        return not getattr(self.cells[x][y], side)

    def open_neighbors(self, x: int, y: int) -> List[Coord2D]:
        """Neighbors reachable from (x, y) in the order up, right, down, left."""
        out = []
        c = self.cells[x][y]
        for side in SIDES:
            if getattr(c, side):
                continue
            n = self.neighbor(x, y, side)
            if n is not None:
                out.append(n)
        return out

    def passage_count(self) -> int:
        """Number of open walls between adjacent cells (each counted once)."""
        count = 0
        for x in range(self.width):
            for y in range(self.height):
                c = self.cells[x][y]
                if x + 1 < self.width and not c.right:
                    count += 1
                if y + 1 < self.height and not c.bottom:
                    count += 1
        return count

    # Convenience outputs
    def to_dict(self) -> Dict[str, Any]:
        # Row-major so clients can index cells[y][x]
        return {
            "width": self.width,
            "height": self.height,
            "cells": [[self.cells[x][y].to_dict() for x in range(self.width)] for y in range(self.height)],
        }

    def to_ascii(self, path: Iterable[Coord2D] = ()) -> str:
        marked = set(path)
        lines = []
        for y in range(self.height):
            top = ["+"]
            body = ["|" if self.cells[0][y].left else " "]
            for x in range(self.width):
                c = self.cells[x][y]
                top.append("---+" if c.top else "   +")
                mark = " * " if (x, y) in marked else "   "
                body.append(mark + ("|" if c.right else " "))
            lines.append("".join(top))
            lines.append("".join(body))
        bottom = ["+"]
        for x in range(self.width):
            bottom.append("---+" if self.cells[x][self.height - 1].bottom else "   +")
        lines.append("".join(bottom))
        return "\n".join(lines)

    def __repr__(self):
        return f"Grid({self.width}x{self.height})"


__all__ = ["Grid", "WallOperationError", "MIN_DIMENSION"]
