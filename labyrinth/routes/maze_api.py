"""
project: Labyrinth
module: maze_api.py
License: MIT

Maze generation, solving and movement API routes.

Every endpoint identifies a maze by (seed, width, height, algorithm) so a
client can regenerate or query the exact same maze without server-side
sessions. Generated mazes are kept in a small in-process cache.
"""

import hashlib
import random
import threading

from flask import Blueprint, current_app, jsonify, request

from labyrinth.logging_utils import get_logger
from labyrinth.maze import ALGORITHMS, SIZE_PRESETS, Maze, MazeConfig, preset_dimensions
from labyrinth.maze.sides import DELTAS, side_for

bp_maze = Blueprint("maze", __name__)

MAX_SEED = 2**31 - 1

_log = get_logger("maze.api")

# Simple in-process cache of generated mazes keyed by (seed, width, height, algorithm)
_maze_cache = {}
_maze_cache_lock = threading.Lock()
_MAZE_CACHE_MAX = 8


def get_cached_maze(seed: int, width: int, height: int, algorithm: str) -> Maze:
    config = MazeConfig(width=width, height=height, algorithm=algorithm, seed=seed)
    enable_metrics = current_app.config.get("MAZE_ENABLE_METRICS", True)
    if current_app.config.get("MAZE_DISABLE_CACHE"):
        return Maze(config, enable_metrics=enable_metrics)
    # Key on the resolved algorithm so aliases share one entry
    key = (seed, width, height, config.algorithm)
    with _maze_cache_lock:
        maze = _maze_cache.get(key)
        if maze is not None:
            return maze
    maze = Maze(config, enable_metrics=enable_metrics)
    with _maze_cache_lock:
        _maze_cache[key] = maze
        if len(_maze_cache) > _MAZE_CACHE_MAX:
            first_key = next(iter(_maze_cache.keys()))
            if first_key != key:
                _maze_cache.pop(first_key, None)
    return maze


def clear_maze_cache():
    with _maze_cache_lock:
        _maze_cache.clear()


def _coerce_seed(payload_seed):
    """Convert provided seed (int or str) into a bounded non-negative int."""
    if payload_seed is None or isinstance(payload_seed, bool):
        return random.randint(1, 1_000_000)
    if isinstance(payload_seed, int):
        return payload_seed % MAX_SEED
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(1, 1_000_000)
        # Signed decimal strings map like JSON ints so both transports agree
        digits = s[1:] if s[0] in "+-" else s
        if digits.isdecimal():
            return int(s) % MAX_SEED
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % MAX_SEED
    raise ValueError(f"seed must be an integer or string, got {type(payload_seed).__name__}")


def _coerce_int(name, raw):
    """Parse an integer from a query string or JSON value without truncating floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(f"{name} must be an integer, got {raw!r}")
        return int(raw)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _string_param(source, name):
    value = source.get(name)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value


def _coerce_dimension(name, raw, default):
    if raw is None or raw == "":
        value = default
    else:
        value = _coerce_int(name, raw)
    limit = current_app.config.get("MAZE_MAX_DIMENSION", 200)
    if value > limit:
        raise ValueError(f"{name} must be <= {limit}, got {value}")
    return value


def _maze_params(source):
    """Extract (seed, width, height, algorithm) from query args or a JSON body."""
    size = _string_param(source, "size") or current_app.config.get("MAZE_DEFAULT_SIZE", "medium")
    default_w, default_h = preset_dimensions(size)
    width = _coerce_dimension("width", source.get("width"), default_w)
    height = _coerce_dimension("height", source.get("height"), default_h)
    algorithm = _string_param(source, "algorithm") or current_app.config.get("MAZE_DEFAULT_ALGORITHM")
    seed = _coerce_seed(source.get("seed"))
    return seed, width, height, algorithm


def _maze_from_args() -> Maze:
    return get_cached_maze(*_maze_params(request.args))


@bp_maze.errorhandler(ValueError)
def _bad_request(e):
    _log.info(event="bad_request", path=request.path, error=str(e))
    return jsonify({"error": str(e)}), 400


@bp_maze.route("/api/maze")
def maze_detail():
    """
    Generate (or fetch from cache) a maze.
    Response: { seed, algorithm, width, height, cells: [[{top,right,bottom,left}]], metrics }
    """
    return jsonify(_maze_from_args().to_json())


@bp_maze.route("/api/maze/solution")
def maze_solution():
    maze = _maze_from_args()
    path = maze.solution
    return jsonify({"seed": maze.seed, "path": [list(p) for p in path], "length": len(path)})


@bp_maze.route("/api/maze/check")
def maze_check():
    maze = _maze_from_args()
    report = maze.check()
    report["seed"] = maze.seed
    return jsonify(report)


@bp_maze.route("/api/maze/move", methods=["POST"])
def maze_move():
    """Attempt one step from (x, y) in the given direction.

    Body JSON: { seed, width, height, algorithm, x, y, direction }
    Response: { x, y, moved, won }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    if data.get("seed") is None:
        raise ValueError("seed is required to identify the maze")
    maze = get_cached_maze(*_maze_params(data))
    x = _coerce_int("x", data.get("x", 0))
    y = _coerce_int("y", data.get("y", 0))
    if not maze.grid.in_bounds(x, y):
        raise ValueError(f"position ({x}, {y}) outside {maze.width}x{maze.height} maze")
    side = side_for(_string_param(data, "direction") or "")
    moved = maze.grid.can_move(x, y, side)
    if moved:
        dx, dy = DELTAS[side]
        x, y = x + dx, y + dy
    return jsonify({"x": x, "y": y, "moved": moved, "won": (x, y) == maze.grid.goal})


@bp_maze.route("/api/maze/algorithms")
def maze_algorithms():
    return jsonify(
        {
            "algorithms": list(ALGORITHMS),
            "default": current_app.config.get("MAZE_DEFAULT_ALGORITHM"),
            "sizes": {name: list(dims) for name, dims in SIZE_PRESETS.items()},
        }
    )
