# src/eisenhower_matrix/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk except the local .env file.
- Tests build their own settings objects instead of touching the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .storage.snapshot import DEFAULT_STORAGE_KEY

ENV_PREFIX = "EISENHOWER"

DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024
DEFAULT_REMOVAL_DELAY_MS = 300


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data (ignored by git) ----
    data_dir: Path
    storage_path: Path
    storage_key: str
    storage_quota_bytes: int

    # ---- Removal transition ----
    removal_delay_ms: int

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "eisenhower").strip() or "eisenhower"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/eisenhower"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "storage.json")
        storage_key = _env(_k("STORAGE_KEY"), DEFAULT_STORAGE_KEY).strip() or DEFAULT_STORAGE_KEY
        storage_quota_bytes = max(0, _env_int(_k("STORAGE_QUOTA_BYTES"), DEFAULT_QUOTA_BYTES))

        removal_delay_ms = max(0, _env_int(_k("REMOVAL_DELAY_MS"), DEFAULT_REMOVAL_DELAY_MS))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_path=storage_path,
            storage_key=storage_key,
            storage_quota_bytes=storage_quota_bytes,
            removal_delay_ms=removal_delay_ms,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings, built on first use after loading .env."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
