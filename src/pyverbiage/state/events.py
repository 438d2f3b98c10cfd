"""Sync lifecycle signals and phases."""

from __future__ import annotations

from enum import StrEnum


class SyncEvent(StrEnum):
    """Signals broadcast to the host application around a terms fetch."""

    LOADING_STARTED = "verbiage:loading-started"
    LOADING_FINISHED = "verbiage:loading-finished"


class SyncPhase(StrEnum):
    INIT = "init"
    DECIDING = "deciding"
    CLEARING = "clearing"
    CHECKING_STALENESS = "checking_staleness"
    FETCHING = "fetching"
    IDLE = "idle"


class SyncBranch(StrEnum):
    """Which path a sync took after the validity decision."""

    FRESH = "fresh"
    STALE = "stale"
