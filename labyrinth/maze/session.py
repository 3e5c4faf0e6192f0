"""Player movement over a finished maze.

Holds the rules of play only: current position, wall-respecting moves, an
optional trail of visited cells, move counter and the win condition (standing
on the bottom-right cell). Input handling, animation and timers belong to the
front end.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .cells import Coord2D
from .grid import Grid
from .sides import DELTAS, side_for


class PlaySession:
    def __init__(self, grid: Grid, track_trail: bool = False):
        self.grid = grid
        self.track_trail = track_trail
        self.reset()

    def reset(self) -> None:
        self.position: Coord2D = self.grid.start
        self.trail: List[Coord2D] = []
        self.moves = 0
        self.won = False

    def move(self, direction: str) -> bool:
        """Step one cell if no wall blocks the way; returns whether the player moved.

        Moves after the goal has been reached are ignored.
        """
        if self.won:
            return False
        x, y = self.position
        if not self.grid.can_move(x, y, direction):
            return False
        dx, dy = DELTAS[side_for(direction)]
        if self.track_trail:
            self.trail.append(self.position)
        self.position = (x + dx, y + dy)
        self.moves += 1
        if self.position == self.grid.goal:
            self.won = True
        return True

    def set_track_trail(self, enabled: bool) -> None:
        self.track_trail = enabled
        if not enabled:
            self.trail = []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.position[0],
            "y": self.position[1],
            "moves": self.moves,
            "won": self.won,
            "trail": [list(p) for p in self.trail],
        }


__all__ = ["PlaySession"]
