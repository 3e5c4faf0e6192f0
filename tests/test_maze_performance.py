import time

import pytest

from labyrinth.maze import generate_maze, solve
from tests.maze_test_utils import ALL_ALGORITHMS


@pytest.mark.performance
@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
def test_large_preset_generation_budget(algorithm):
    start = time.perf_counter()
    grid = generate_maze(35, 35, algorithm, seed=17)
    solve(grid, cutoff_ratio=None)
    elapsed = time.perf_counter() - start
    # Generous ceiling to avoid flakes on slow CI runners
    assert elapsed < 2.0, f"{algorithm} took {elapsed:.3f}s"


@pytest.mark.performance
def test_max_dimension_generation():
    start = time.perf_counter()
    grid = generate_maze(200, 200, "recursive-backtracking", seed=1)
    assert grid.size == 40000
    assert time.perf_counter() - start < 10.0
