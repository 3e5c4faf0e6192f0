"""Eller's algorithm: row-by-row generation backed by a disjoint-set.

Per row:
    * Horizontal pass: adjacent cells in different sets are joined with
      probability 0.5; on the final row every such pair is joined so all sets
      collapse into one.
    * Vertical pass (all rows but the last): cells are grouped by set
      representative and each group carves downward from a random, non-empty
      subset of its own members. Every set therefore continues into the next
      row and none can be stranded.
"""

from __future__ import annotations

import random
from typing import Dict, List

from ..grid import Grid
from ..sides import BOTTOM, RIGHT
from ..union_find import UnionFind

JOIN_PROBABILITY = 0.5


def _row_groups(sets: UnionFind, width: int, y: int) -> Dict[int, List[int]]:
    groups: Dict[int, List[int]] = {}
    for x in range(width):
        groups.setdefault(sets.find(y * width + x), []).append(x)
    return groups


def generate_eller(grid: Grid, rng: random.Random) -> None:
    w, h = grid.width, grid.height
    sets = UnionFind(w * h)
    for y in range(h):
        last_row = y == h - 1
        for x in range(w - 1):
            here, right = y * w + x, y * w + x + 1
            if sets.connected(here, right):
                continue
            if last_row or rng.random() < JOIN_PROBABILITY:
                sets.union(here, right)
                grid.remove_wall(x, y, RIGHT)
        if last_row:
            break
        for members in _row_groups(sets, w, y).values():
            count = rng.randint(1, len(members))
            for x in rng.sample(members, count):
                sets.union(y * w + x, (y + 1) * w + x)
                grid.remove_wall(x, y, BOTTOM)


__all__ = ["generate_eller", "JOIN_PROBABILITY"]
