import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from labyrinth import create_app  # noqa: E402
from labyrinth.routes.maze_api import clear_maze_cache  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app()
    app.config.update({"TESTING": True, "MAZE_DISABLE_CACHE": False, "MAZE_MAX_DIMENSION": 200})
    return app


@pytest.fixture(autouse=True)
def _push_app_context(test_app):
    ctx = test_app.app_context()
    ctx.push()
    try:
        yield
    finally:
        ctx.pop()


@pytest.fixture()
def client(test_app):
    clear_maze_cache()
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    # Keep captured stdout free of info-level structured log lines
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "warn")
