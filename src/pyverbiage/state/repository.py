"""Typed access to the three cached key families.

The locale set, the last-update timestamps and the per-locale term maps
are stored as independent keys. This repository is the only component
that knows those keys; everything else goes through it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from pyverbiage._constants import LAST_UPDATE_KEY, LOCALES_KEY, term_key
from pyverbiage.models.last_update import UpdateTimestamps
from pyverbiage.models.locales import TermMap, format_locale_set, parse_locale_set
from pyverbiage.storage.base import PersistentStore

_logger = logging.getLogger(__name__)


class TermRepository:
    """Read and write cached verbiage state on a :class:`PersistentStore`."""

    def __init__(self, store: PersistentStore) -> None:
        self._store = store

    @property
    def store(self) -> PersistentStore:
        return self._store

    # ------------------------------------------------------------------
    # Locale set
    # ------------------------------------------------------------------

    def get_locales(self) -> list[str]:
        return parse_locale_set(self._store.get(LOCALES_KEY))

    def set_locales(self, locales: Iterable[str]) -> None:
        """Store *locales*. An empty collection is ignored."""
        values = list(locales)
        if not values:
            return
        self._store.set(LOCALES_KEY, format_locale_set(values))

    def remove_locales(self) -> None:
        self._store.remove(LOCALES_KEY)

    # ------------------------------------------------------------------
    # Last-update timestamps
    # ------------------------------------------------------------------

    def get_last_update(self) -> UpdateTimestamps | None:
        """Return the stored baseline, or ``None`` if absent or unreadable."""
        stored = self._store.get(LAST_UPDATE_KEY)
        if stored is None:
            return None
        try:
            return UpdateTimestamps.model_validate(json.loads(stored))
        except (json.JSONDecodeError, ValidationError):
            _logger.warning("Stored last-update value is unreadable, treating as absent: %.64s", stored)
            return None

    def set_last_update(self, timestamps: UpdateTimestamps) -> None:
        self._store.set(LAST_UPDATE_KEY, timestamps.to_json())

    def remove_last_update(self) -> None:
        self._store.remove(LAST_UPDATE_KEY)

    # ------------------------------------------------------------------
    # Term maps
    # ------------------------------------------------------------------

    def has_terms(self, locale: str) -> bool:
        return self._store.get(term_key(locale)) is not None

    def get_terms(self, locale: str) -> TermMap | None:
        """Return the stored TermMap for *locale*, or ``None`` if absent or unreadable."""
        stored = self._store.get(term_key(locale))
        if stored is None:
            return None
        if not stored:
            return {}
        try:
            value: Any = json.loads(stored)
        except json.JSONDecodeError:
            _logger.warning("Stored terms for %s are unreadable, treating as absent", locale)
            return None
        if not isinstance(value, dict):
            _logger.warning("Stored terms for %s are not an object, treating as absent", locale)
            return None
        return value

    def set_terms(self, locale: str, terms: Mapping[str, Any]) -> None:
        self._store.set(term_key(locale), json.dumps(dict(terms)))

    def remove_terms(self, locales: Iterable[str]) -> None:
        for locale in locales:
            self._store.remove(term_key(locale))
