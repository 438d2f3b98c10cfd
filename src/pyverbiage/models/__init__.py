"""Data models for Verbiage API responses and cached state."""

from pyverbiage.models._base import VerbiageBaseModel, VerbiageTimestamp, parse_timestamp
from pyverbiage.models.last_update import UpdateTimestamps
from pyverbiage.models.locales import (
    TermMap,
    format_locale_set,
    is_plain_payload,
    parse_locale_set,
    same_locale_set,
)

__all__ = [
    "TermMap",
    "UpdateTimestamps",
    "VerbiageBaseModel",
    "VerbiageTimestamp",
    "format_locale_set",
    "is_plain_payload",
    "parse_locale_set",
    "parse_timestamp",
    "same_locale_set",
]
