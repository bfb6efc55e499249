# tests/test_config.py

from __future__ import annotations

import io
import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from eisenhower_matrix.config import DEFAULT_QUOTA_BYTES, Settings
from eisenhower_matrix.core.errors import PersistenceError
from eisenhower_matrix.logging_setup import level_from_name, setup_logging


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "APP_NAME",
        "LOG_LEVEL",
        "DATA_DIR",
        "STORAGE_PATH",
        "STORAGE_KEY",
        "STORAGE_QUOTA_BYTES",
        "REMOVAL_DELAY_MS",
    ):
        monkeypatch.delenv(f"EISENHOWER_{name}", raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()

    assert s.app_name == "eisenhower"
    assert s.storage_key == "eisenhower-tasks"
    assert s.storage_path == Path(".local/eisenhower") / "storage.json"
    assert s.storage_quota_bytes == DEFAULT_QUOTA_BYTES
    assert s.removal_delay_ms == 300


def test_overrides_and_bad_numbers(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("EISENHOWER_DATA_DIR", str(tmp_path))
    clean_env.setenv("EISENHOWER_STORAGE_KEY", "my-board")
    clean_env.setenv("EISENHOWER_REMOVAL_DELAY_MS", "not-a-number")
    clean_env.setenv("EISENHOWER_STORAGE_QUOTA_BYTES", "-5")

    s = Settings.from_env()

    assert s.storage_path == tmp_path / "storage.json"
    assert s.storage_key == "my-board"
    assert s.removal_delay_ms == 300
    assert s.storage_quota_bytes == 0


def test_setup_logging_keeps_console_short_and_file_complete(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    console = io.StringIO()
    settings = SimpleNamespace(app_name="board", data_dir=tmp_path, log_level="warning")
    try:
        log_file = setup_logging(settings, stream=console)
        app = logging.getLogger("eisenhower_matrix.tasks.task_store")
        app.debug("Task created id=1")
        try:
            raise PersistenceError("storage quota exceeded")
        except PersistenceError:
            app.warning("Snapshot save failed; keeping in-memory state.", exc_info=True)
        logging.getLogger("asyncio").warning("slow callback")
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "board.log"
        assert console.getvalue().splitlines() == [
            "warning: Snapshot save failed; keeping in-memory state. (storage quota exceeded)"
        ]
        written = log_file.read_text("utf-8")
        assert "Task created id=1" in written
        assert "Traceback" in written
        assert "slow callback" in written
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" Warning ") == logging.WARNING
    assert level_from_name("chatty") == logging.INFO
