"""Persistent key-value stores backing the term cache."""

from pyverbiage.storage.base import PersistentStore
from pyverbiage.storage.file import JsonFileStore
from pyverbiage.storage.memory import MemoryStore

__all__ = ["JsonFileStore", "MemoryStore", "PersistentStore"]
