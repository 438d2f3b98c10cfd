"""JSON file backed store that survives process restarts."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

_logger = logging.getLogger(__name__)


class JsonFileStore:
    """Persist all keys in a single JSON object on disk.

    The file is read once at construction and rewritten on every
    mutation. Writes go to a sibling temporary file that replaces the
    target, so a crash never leaves a half-written file behind. Nothing
    guards against two processes sharing the same path.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        self._data: dict[str, str] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, OSError):
            _logger.warning("Ignoring unreadable store file %s", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            _logger.warning("Ignoring store file %s: top level is not an object", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _commit(self, data: dict[str, str]) -> None:
        """Write *data* to disk, then adopt it. A failed write changes nothing."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(f"{self._path.name}.tmp")
        try:
            with tmp.open("w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2, sort_keys=True)
            os.replace(tmp, self._path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        self._data = data

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._commit({**self._data, key: str(value)})

    def remove(self, key: str) -> None:
        if key in self._data:
            self._commit({k: v for k, v in self._data.items() if k != key})
