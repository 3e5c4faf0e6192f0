"""Generator registry.

Every generator has the signature ``fn(grid, rng) -> None``: it takes a fully
walled :class:`~labyrinth.maze.grid.Grid` plus a ``random.Random`` and carves
a perfect maze in place.
"""

from __future__ import annotations

from typing import Callable, Dict

from ...logging_utils import get_logger
from .backtracking import generate_recursive_backtracking
from .binary_tree import generate_binary_tree
from .division import generate_recursive_division
from .eller import generate_eller
from .prim import generate_prim

RECURSIVE_BACKTRACKING = "recursive-backtracking"
BINARY_TREE = "binary-tree"
ELLER = "eller"
PRIM = "prim"
RECURSIVE_DIVISION = "recursive-division"

DEFAULT_ALGORITHM = RECURSIVE_BACKTRACKING

ALGORITHMS: Dict[str, Callable] = {
    RECURSIVE_BACKTRACKING: generate_recursive_backtracking,
    BINARY_TREE: generate_binary_tree,
    ELLER: generate_eller,
    PRIM: generate_prim,
    RECURSIVE_DIVISION: generate_recursive_division,
}

_log = get_logger("maze.generators")


def resolve_algorithm(name: str | None) -> str:
    """Normalize an algorithm name, falling back to the default for unknown ones."""
    key = (name or "").strip().lower().replace("_", "-")
    if key in ALGORITHMS:
        return key
    _log.warn(event="unknown_algorithm", requested=name, fallback=DEFAULT_ALGORITHM)
    return DEFAULT_ALGORITHM


def get_generator(name: str | None) -> Callable:
    return ALGORITHMS[resolve_algorithm(name)]


__all__ = [
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "RECURSIVE_BACKTRACKING",
    "BINARY_TREE",
    "ELLER",
    "PRIM",
    "RECURSIVE_DIVISION",
    "resolve_algorithm",
    "get_generator",
    "generate_recursive_backtracking",
    "generate_binary_tree",
    "generate_eller",
    "generate_prim",
    "generate_recursive_division",
]
