# src/eisenhower_matrix/storage/backends.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from ..core.errors import PersistenceError

logger = logging.getLogger(__name__)


def _item_size(key: str, value: str) -> int:
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))


def _check_quota(items: dict[str, str], quota_bytes: int | None) -> None:
    if not quota_bytes:
        return
    used = sum(_item_size(k, v) for k, v in items.items())
    if used > quota_bytes:
        raise PersistenceError(f"storage quota exceeded ({used} > {quota_bytes} bytes)")


class MemoryBackend:
    """
    In-process key/value store.

    Used by tests and by headless runs that do not want anything on disk.
    quota_bytes mimics the browser storage limit (None or 0 disables it).
    """

    def __init__(self, *, quota_bytes: int | None = None) -> None:
        self._items: dict[str, str] = {}
        self.quota_bytes = quota_bytes

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        candidate = dict(self._items)
        candidate[key] = value
        _check_quota(candidate, self.quota_bytes)
        self._items = candidate


class FileBackend:
    """
    Key/value store kept as one JSON object on disk.

    Every write rewrites the whole document through a temp file + os.replace,
    so a crash mid-write never leaves a half-written file behind.
    """

    def __init__(self, path: str | Path, *, quota_bytes: int | None = None) -> None:
        self.path = Path(path)
        self.quota_bytes = quota_bytes

    def _read_document(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text("utf-8"))
        except (OSError, ValueError, RecursionError) as e:
            raise PersistenceError(f"cannot read storage file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"storage file {self.path} must contain a JSON object")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_document(self, items: dict[str, str]) -> None:
        _check_quota(items, self.quota_bytes)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(items, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise PersistenceError(f"cannot write storage file {self.path}: {e}") from e
        with contextlib.suppress(OSError):
            os.chmod(self.path, 0o600)

    def get_item(self, key: str) -> str | None:
        return self._read_document().get(key)

    def set_item(self, key: str, value: str) -> None:
        try:
            items = self._read_document()
        except PersistenceError:
            logger.warning("Storage file %s is unreadable; starting a fresh document.", self.path)
            items = {}
        items[key] = value
        self._write_document(items)
