# src/eisenhower_matrix/logging_setup.py

"""
Logging for the console app.

The terminal is shared with the task board, so the console handler keeps to
one line per record and leaves tracebacks to the log file. The file under
data_dir gets everything at DEBUG and is named after the app.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

APP_LOGGER = "eisenhower_matrix"


def level_from_name(name: object, default: int = logging.INFO) -> int:
    return logging.getLevelNamesMapping().get(str(name).strip().upper(), default)


def log_file_path(settings) -> Path:
    return Path(settings.data_dir) / f"{settings.app_name}.log"


class _BoardConsoleFilter(logging.Filter):
    """App records at the configured level; everything else (py.warnings, asyncio) only at ERROR+."""

    def __init__(self, app_level: int) -> None:
        super().__init__()
        self.app_level = app_level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return record.levelno >= self.app_level
        return record.levelno >= logging.ERROR


class _OneLineFormatter(logging.Formatter):
    """One line per record; the exception message stands in for the traceback."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and record.exc_info[1] is not None:
            message = f"{message} ({record.exc_info[1]})"
        return f"{record.levelname.lower()}: {message}"


def setup_logging(settings, *, stream: TextIO | None = None) -> Path:
    """
    Install the console and file handlers on the root logger.

    Call once, before the first log line. Replaces any handlers already
    installed. Returns the log file path.
    """
    log_file = log_file_path(settings)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    console = logging.StreamHandler(stream or sys.stderr)
    console.addFilter(_BoardConsoleFilter(level_from_name(settings.log_level)))
    console.setFormatter(_OneLineFormatter())
    root.addHandler(console)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
