"""pyverbiage - Async client that keeps cached verbiage terms in sync with the Verbiage API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyverbiage")
except PackageNotFoundError:
    __version__ = "0+local"
from pyverbiage.client import SyncOutcome, VerbiageClient
from pyverbiage.config import VerbiageConfig
from pyverbiage.exceptions import (
    VerbiageConfigError,
    VerbiageError,
    VerbiageTransportError,
)
from pyverbiage.models import TermMap, UpdateTimestamps
from pyverbiage.state.events import SyncBranch, SyncEvent, SyncPhase
from pyverbiage.storage import JsonFileStore, MemoryStore, PersistentStore

__all__ = [
    "__version__",
    "JsonFileStore",
    "MemoryStore",
    "PersistentStore",
    "SyncBranch",
    "SyncEvent",
    "SyncOutcome",
    "SyncPhase",
    "TermMap",
    "UpdateTimestamps",
    "VerbiageClient",
    "VerbiageConfig",
    "VerbiageConfigError",
    "VerbiageError",
    "VerbiageTransportError",
]
