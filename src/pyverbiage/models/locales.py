"""Locale set and term map helpers.

A locale set is persisted as a single comma-joined string. Order is
irrelevant for equality but duplicates are significant.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeGuard

from pyverbiage._constants import LOCALE_DELIMITER

TermMap = dict[str, Any]
"""Term key to term value (string or nested structure) for one locale."""


def parse_locale_set(value: str | None) -> list[str]:
    """Split a stored locale string. ``None`` and ``""`` give an empty list.

    Empty parts (``"en,"``, ``"en,,se"``) are dropped.
    """
    if not value:
        return []
    return [part for part in value.split(LOCALE_DELIMITER) if part]


def format_locale_set(locales: Iterable[str]) -> str:
    return LOCALE_DELIMITER.join(locales)


def same_locale_set(left: Iterable[str], right: Iterable[str]) -> bool:
    """Order-independent, duplicate-sensitive comparison. Inputs are not mutated."""
    return sorted(left) == sorted(right)


def is_plain_payload(value: Any) -> TypeGuard[Mapping[str, Any]]:
    """Return ``True`` for a non-empty mapping.

    ``None``, lists, scalars and empty mappings all fail this check.
    """
    return isinstance(value, Mapping) and len(value) > 0
