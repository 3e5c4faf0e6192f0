"""
project: Labyrinth
module: __init__.py
License: MIT

Flask application factory and core setup.

This module wires the maze JSON API into a Flask app. Configuration is sourced
from environment variables (optionally from a local .env file) with defaults
suitable for development. A local `instance/` directory holds runtime data
such as the rotating log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

# Load .env if present so MAZE_* settings can be supplied without exporting
# shell variables during development.
load_dotenv()

# Instance-relative config so ./instance can hold logs
app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only checkouts: logging falls back to the console handler
    pass


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


app.config.update(
    # Maze generation defaults / limits
    MAZE_DEFAULT_SIZE=os.getenv("MAZE_DEFAULT_SIZE", "medium"),
    MAZE_DEFAULT_ALGORITHM=os.getenv("MAZE_DEFAULT_ALGORITHM", "recursive-backtracking"),
    MAZE_MAX_DIMENSION=int(os.getenv("MAZE_MAX_DIMENSION", "200")),
    MAZE_DISABLE_CACHE=_env_flag("MAZE_DISABLE_CACHE"),
    MAZE_ENABLE_METRICS=_env_flag("MAZE_ENABLE_METRICS", "1"),
)

# Register HTTP blueprints (import after app created)
from labyrinth.routes.maze_api import bp_maze  # noqa: E402

app.register_blueprint(bp_maze)


def create_app(config=None):
    """Return the Flask app instance, applying optional config overrides."""
    if config:
        app.config.update(config)
    return app


@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal server error", "error_id": error_id}), 500
