"""Public maze package interface."""

from .cells import MazeCell
from .config import DEFAULT_SIZE, SIZE_PRESETS, MazeConfig, preset_dimensions
from .connectivity import (
    boundaries_intact,
    check_boundaries,
    check_maze,
    check_wall_symmetry,
    connected_components,
    is_perfect,
    reachable_count,
    validate_structure,
)
from .generators import ALGORITHMS, DEFAULT_ALGORITHM, get_generator, resolve_algorithm
from .grid import Grid, WallOperationError
from .pipeline import Maze, generate_maze
from .session import PlaySession
from .sides import BOTTOM, LEFT, RIGHT, TOP
from .solver import solve
from .union_find import UnionFind  # noqa: F401

__all__ = [
    "Maze",
    "MazeCell",
    "MazeConfig",
    "Grid",
    "WallOperationError",
    "UnionFind",
    "PlaySession",
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "SIZE_PRESETS",
    "DEFAULT_SIZE",
    "TOP",
    "RIGHT",
    "BOTTOM",
    "LEFT",
    "generate_maze",
    "get_generator",
    "resolve_algorithm",
    "preset_dimensions",
    "solve",
    "reachable_count",
    "connected_components",
    "check_boundaries",
    "boundaries_intact",
    "check_wall_symmetry",
    "validate_structure",
    "is_perfect",
    "check_maze",
]
