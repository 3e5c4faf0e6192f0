from typing import Dict, List, Tuple

from .sides import SIDES


class MazeCell:
    """Lightweight container for the four wall flags of a maze cell."""
    __slots__ = SIDES
    def __init__(self, top: bool = True, right: bool = True, bottom: bool = True, left: bool = True):
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left

    def walls(self) -> Dict[str, bool]:
        return {side: getattr(self, side) for side in SIDES}

    def to_dict(self):
        return self.walls()

    def __repr__(self):
        flags = "".join(s[0].upper() if getattr(self, s) else "." for s in SIDES)
        return f"MazeCell({flags})"

Coord2D = Tuple[int,int]
Path = Tuple[Coord2D, ...]
Grid2D = List[List[MazeCell]]
