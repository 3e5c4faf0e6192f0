import random

import pytest

from labyrinth.maze import Grid, check_wall_symmetry, is_perfect
from labyrinth.maze.generators.division import (
    HORIZONTAL,
    VERTICAL,
    _divide,
    choose_orientation,
    generate_recursive_division,
)


def test_orientation_follows_region_shape():
    rng = random.Random(0)
    assert choose_orientation(4, 10, rng) == HORIZONTAL
    assert choose_orientation(10, 4, rng) == VERTICAL
    picks = {choose_orientation(6, 6, random.Random(s)) for s in range(20)}
    assert picks == {HORIZONTAL, VERTICAL}


def test_single_division_leaves_one_passage():
    grid = Grid.create(6, 10)
    grid.clear_interior()
    before = grid.passage_count()
    subregions = _divide(grid, (0, 0, 6, 10), random.Random(11))
    # Taller than wide: a horizontal line of 6 cells with one gap
    assert grid.passage_count() == before - 5
    assert check_wall_symmetry(grid) == []
    (x1, y1, w1, h1), (x2, y2, w2, h2) = subregions
    assert (x1, x2, w1, w2) == (0, 0, 6, 6)
    assert h1 + h2 == 10 and y2 == y1 + h1


def test_corridor_regions_are_not_divided():
    grid = Grid.create(2, 2)
    assert _divide(grid, (0, 0, 1, 2), random.Random(1)) == []
    assert _divide(grid, (0, 0, 2, 1), random.Random(1)) == []


@pytest.mark.parametrize("seed", range(10))
def test_division_produces_symmetric_perfect_maze(seed):
    grid = Grid.create(17, 11)
    generate_recursive_division(grid, random.Random(seed))
    assert check_wall_symmetry(grid) == []
    assert is_perfect(grid)


def test_division_handles_large_grid_without_recursion_limit():
    grid = Grid.create(150, 150)
    generate_recursive_division(grid, random.Random(8))
    assert is_perfect(grid)
