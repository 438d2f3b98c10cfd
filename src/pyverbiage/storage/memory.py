"""In-memory store."""

from __future__ import annotations

from collections.abc import Mapping


class MemoryStore:
    """Dict-backed :class:`~pyverbiage.storage.PersistentStore`.

    Useful for tests and for a single process that does not need the
    cache to outlive it.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
