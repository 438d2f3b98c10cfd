"""Persistent key-value store interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PersistentStore(Protocol):
    """Synchronous string key-value storage.

    There are no transactions: every call is an independent key write.
    Implementations should survive process restarts when used as a
    durable cache; :class:`~pyverbiage.storage.MemoryStore` does not.
    """

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...
