"""Client configuration for pyverbiage."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Iterable
from typing import Any

from pyverbiage._constants import DEFAULT_BASE_URL, DEFAULT_LOCALES, LOCALE_DELIMITER
from pyverbiage.exceptions import VerbiageConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _split_locales(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(LOCALE_DELIMITER) if part.strip())


@dataclasses.dataclass(frozen=True)
class VerbiageConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Verbiage API base URL. Endpoint paths are appended to it.
    locales : tuple[str, ...]
        Locales requested from the API and kept in the local cache.
        Any iterable of strings is accepted and normalized to a tuple.
    tag : str or None
        Optional tag passed through to the generate endpoint.
    sync_on_enter : bool
        Run :meth:`VerbiageClient.sync` when entering ``async with``.
    """

    base_url: str = DEFAULT_BASE_URL
    locales: tuple[str, ...] = DEFAULT_LOCALES
    tag: str | None = None
    sync_on_enter: bool = True

    def __post_init__(self) -> None:
        if not self.base_url or not self.base_url.strip():
            raise VerbiageConfigError("base_url must be non-empty")
        # Strip a trailing slash so endpoint paths join cleanly.
        object.__setattr__(self, "base_url", self.base_url.strip().rstrip("/"))

        locales = self.locales
        if isinstance(locales, str):
            locales = _split_locales(locales)
        normalized = tuple(str(locale).strip() for locale in locales)
        if not normalized:
            raise VerbiageConfigError("at least one locale is required")
        for locale in normalized:
            if not locale:
                raise VerbiageConfigError("locales must be non-empty strings")
            if LOCALE_DELIMITER in locale:
                raise VerbiageConfigError(f"locale {locale!r} must not contain {LOCALE_DELIMITER!r}")
        object.__setattr__(self, "locales", normalized)

    def with_locales(self, locales: Iterable[str]) -> VerbiageConfig:
        """Return a copy of this configuration requesting *locales*."""
        return dataclasses.replace(self, locales=tuple(locales))

    @classmethod
    def from_env(cls, **overrides: Any) -> VerbiageConfig:
        """Create configuration from environment variables.

        Reads ``VERBIAGE_BASE_URL``, ``VERBIAGE_LOCALES`` (comma-separated),
        ``VERBIAGE_TAG`` and ``VERBIAGE_SYNC_ON_ENTER``. Explicit keyword
        arguments override environment values.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}

        base_url = env.get("VERBIAGE_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        locales = env.get("VERBIAGE_LOCALES")
        if locales is not None:
            config_kwargs["locales"] = _split_locales(locales)

        tag = env.get("VERBIAGE_TAG")
        if tag:
            config_kwargs["tag"] = tag

        if "sync_on_enter" not in overrides:
            config_kwargs["sync_on_enter"] = _env_bool(env.get("VERBIAGE_SYNC_ON_ENTER"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
