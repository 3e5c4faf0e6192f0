import json
import logging
from pathlib import Path

from labyrinth import logging_utils
from labyrinth.logging_utils import get_logger


def test_key_value_format(monkeypatch, capsys):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "info")
    monkeypatch.delenv("LABYRINTH_LOG_JSON", raising=False)
    get_logger("test.kv").info(event="maze_generated", algorithm="prim", width=10, note="two words", skip=None)
    line = capsys.readouterr().out.strip()
    assert line.startswith("level=info ts=")
    assert "event=maze_generated" in line and "width=10" in line
    assert "note=two_words" in line and "logger=test.kv" in line
    assert "skip=" not in line


def test_json_mode(monkeypatch, capsys):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "debug")
    monkeypatch.setenv("LABYRINTH_LOG_JSON", "1")
    get_logger("test.json").debug(event="probe", cells=4)
    rec = json.loads(capsys.readouterr().out)
    assert rec["level"] == "debug" and rec["event"] == "probe" and rec["cells"] == 4


def test_level_filter_and_stderr(monkeypatch, capsys):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "warn")
    log = get_logger("test.filter")
    log.info(event="hidden")
    log.error(event="shown")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "event=shown" in captured.err


def test_logger_cache():
    assert get_logger("same") is get_logger("same")
    assert logging_utils.log.name == "labyrinth"


def test_configure_logging_sets_handlers(tmp_path, monkeypatch):
    from labyrinth import server

    root = logging.getLogger()
    saved = list(root.handlers), root.level
    monkeypatch.setattr(server.app, "instance_path", str(tmp_path))
    try:
        server._configure_logging()
        kinds = {type(h).__name__ for h in root.handlers}
        assert "RotatingFileHandler" in kinds and "StreamHandler" in kinds
        assert (Path(tmp_path) / "app.log").exists()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])


def test_internal_error_returns_json(test_app):
    from labyrinth import internal_error

    with test_app.test_request_context("/api/maze"):
        resp, status = internal_error(RuntimeError("boom"))
    assert status == 500
    body = resp.get_json()
    assert body["error"] == "internal server error" and len(body["error_id"]) == 8
