"""Selective persistence of fetched term maps."""

from __future__ import annotations

import logging
from typing import Any

from pyverbiage.models.locales import is_plain_payload
from pyverbiage.state.repository import TermRepository

_logger = logging.getLogger(__name__)


class TermCacheWriter:
    """Write fetched TermMaps for the locales currently stored.

    Iteration is driven by the stored locale set, never by the payload
    keys, so foreign locales in a response are not written. Locales that
    are missing or empty in the payload keep whatever was stored before.
    """

    def __init__(self, repository: TermRepository) -> None:
        self._repository = repository

    def persist(self, terms_by_locale: Any) -> list[str]:
        """Persist *terms_by_locale* and return the locales written."""
        if not is_plain_payload(terms_by_locale):
            _logger.debug("Dropping malformed terms payload of type %s", type(terms_by_locale).__name__)
            return []

        written: list[str] = []
        for locale in self._repository.get_locales():
            terms = terms_by_locale.get(locale)
            if not is_plain_payload(terms):
                _logger.debug("No terms for %s in payload, keeping cached value", locale)
                continue
            self._repository.set_terms(locale, terms)
            written.append(locale)
        return written
