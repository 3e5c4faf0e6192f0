"""Maze generation pipeline.

``generate_maze`` is the pure entry point: dimensions, algorithm and seed in,
a freshly carved :class:`Grid` out. Nothing is shared between calls and the
global ``random`` module is never touched; each run owns a local
``random.Random``.

``Maze`` wraps one run for callers that also want the seed, metrics and the
solution path (web API, CLI, diagnostics):

    Maze(MazeConfig(...)) OR Maze(width=.., height=.., algorithm=.., seed=..)
    Attributes: grid, config, seed, algorithm, metrics (dict)
"""

from __future__ import annotations

import os
import random
import time
from dataclasses import replace
from typing import Any, Dict, Optional

from ..logging_utils import get_logger
from .cells import Path
from .config import MazeConfig
from .connectivity import check_maze
from .generators import DEFAULT_ALGORITHM, get_generator
from .grid import Grid
from .metrics import collect_grid_metrics, init_metrics
from .solver import solve

_log = get_logger("maze.pipeline")


def new_seed() -> int:
    return random.randint(0, 2**31 - 1)


def generate_maze(
    width: int,
    height: int,
    algorithm: str = DEFAULT_ALGORITHM,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Allocate a fully walled grid and carve it with the chosen algorithm."""
    grid = Grid.create(width, height)
    if rng is None:
        rng = random.Random(seed)
    get_generator(algorithm)(grid, rng)
    return grid


class Maze:
    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        width: int | None = None,
        height: int | None = None,
        algorithm: str | None = None,
        seed: int | None = None,
        enable_metrics: bool | None = None,
    ):
        if config is None:
            config = MazeConfig(
                width=width if width is not None else 25,
                height=height if height is not None else 25,
                algorithm=algorithm or DEFAULT_ALGORITHM,
                seed=seed,
            )
        else:
            overrides = {"width": width, "height": height, "algorithm": algorithm, "seed": seed}
            config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
        if config.seed is None:
            config.seed = new_seed()
        self.config = config
        if enable_metrics is None:
            enable_metrics = os.getenv("MAZE_ENABLE_METRICS", "1").lower() not in {"0", "false", "no", ""}
        self.enable_metrics = enable_metrics
        self.metrics: Dict[str, Any] = init_metrics() if enable_metrics else {}
        self._solution: Optional[Path] = None
        self._run_pipeline()

    @property
    def seed(self) -> int:
        return self.config.seed

    @property
    def algorithm(self) -> str:
        return self.config.algorithm

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def _run_pipeline(self):
        """Generate the grid, then collect metrics with per-phase timing.

        `phase_ms` maps phase name -> duration (ms) when metrics are enabled.
        """
        if self.enable_metrics:
            start = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter(); r = fn(*a, **k); pe = time.perf_counter()
                phase_times[label] = round((pe - ps) * 1000, 3)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)
        cfg = self.config
        self.grid = _phase("generate", generate_maze, cfg.width, cfg.height, cfg.algorithm, cfg.seed)
        if self.enable_metrics:
            _phase("collect_metrics", collect_grid_metrics, self.grid, self.metrics)
            self.metrics["runtime_ms"] = round((time.perf_counter() - start) * 1000, 3)
            self.metrics["phase_ms"] = phase_times
        _log.info(
            event="maze_generated",
            algorithm=cfg.algorithm,
            width=cfg.width,
            height=cfg.height,
            seed=cfg.seed,
            runtime_ms=self.metrics.get("runtime_ms"),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def solution(self) -> Path:
        """Shortest path from the top-left to the bottom-right cell (cached)."""
        if self._solution is None:
            self._solution = self.solve()
            if self.enable_metrics:
                self.metrics["solution_length"] = len(self._solution)
        return self._solution

    def solve(self, cutoff_ratio: Optional[float] = None) -> Path:
        path = solve(self.grid, cutoff_ratio=cutoff_ratio)
        if not path:
            _log.warn(event="maze_unsolvable", algorithm=self.algorithm, seed=self.seed)
        return path

    def check(self) -> Dict[str, Any]:
        return check_maze(self.grid)

    # Convenience outputs
    def to_ascii(self, show_solution: bool = False) -> str:
        return self.grid.to_ascii(self.solution if show_solution else ())

    def to_json(self, include_solution: bool = False) -> Dict[str, Any]:
        data = {
            "seed": self.seed,
            "algorithm": self.algorithm,
            **self.grid.to_dict(),
            "metrics": self.metrics,
        }
        if include_solution:
            data["solution"] = [list(p) for p in self.solution]
        return data


__all__ = ["Maze", "generate_maze", "new_seed"]

if __name__ == "__main__":  # manual quick smoke
    m = Maze(width=12, height=8, seed=1234)
    print(m.to_ascii(show_solution=True))
    print(m.metrics)
