"""Custom exception hierarchy for pyverbiage."""

from __future__ import annotations


class VerbiageError(Exception):
    """Base exception for all pyverbiage errors."""


class VerbiageConfigError(VerbiageError):
    """Invalid or missing configuration."""


class VerbiageTransportError(VerbiageError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)
