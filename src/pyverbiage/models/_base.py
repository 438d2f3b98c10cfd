"""Base model and timestamp coercion for Verbiage API responses.

Every Verbiage response model inherits from :class:`VerbiageBaseModel`
which is frozen, ignores unknown keys and stashes the original payload
in ``raw``.

Timestamps arrive either as ISO-8601 strings or as epoch numbers in
seconds or milliseconds. :data:`VerbiageTimestamp` coerces all of them
to timezone-aware UTC datetimes so they compare chronologically.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000

_ISO_BASIC_DATE = re.compile(r"\d{8}")


def _from_epoch(value: float) -> datetime:
    if not math.isfinite(value):
        raise ValueError(f"not a timestamp: {value!r}")
    if value >= _MS_THRESHOLD:
        value = value / 1000
    try:
        return datetime.fromtimestamp(value, tz=UTC)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"timestamp out of range: {value!r}") from exc


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def parse_timestamp(value: Any) -> datetime:
    """Convert an ISO-8601 string or epoch value (seconds **or** milliseconds) to a UTC datetime.

    An all-digit string of eight characters is an ISO-8601 basic date
    (``YYYYMMDD``), not an epoch value. Other numeric strings are epochs.

    Raises :class:`ValueError` for anything else, including ``None``.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, bool):
        raise ValueError(f"not a timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return _from_epoch(float(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("empty timestamp")
        if _ISO_BASIC_DATE.fullmatch(text):
            return _as_utc(datetime.fromisoformat(text))
        try:
            return _from_epoch(float(text))
        except ValueError:
            pass
        return _as_utc(datetime.fromisoformat(text))
    raise ValueError(f"not a timestamp: {value!r}")


VerbiageTimestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]
"""Annotated type that coerces ISO-8601 strings and epoch numbers to UTC datetimes."""


class VerbiageBaseModel(BaseModel):
    """Base for Verbiage API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        """Keep the original payload unless ``raw`` was passed explicitly."""
        if not isinstance(values, dict):
            return values
        if "raw" in values:
            return values
        return {**values, "raw": dict(values)}
