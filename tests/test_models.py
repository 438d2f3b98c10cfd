"""Tests for timestamp coercion and the locale helpers."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from pyverbiage.models import (
    UpdateTimestamps,
    format_locale_set,
    is_plain_payload,
    parse_locale_set,
    parse_timestamp,
    same_locale_set,
)

JAN_1 = datetime(2024, 1, 1, tzinfo=UTC)

# ------------------------------------------------------------------
# parse_timestamp
# ------------------------------------------------------------------


class TestParseTimestamp:
    @pytest.mark.parametrize(
        "value",
        [
            "2024-01-01T00:00:00Z",
            "2024-01-01T00:00:00+00:00",
            "2024-01-01T01:00:00+01:00",
            "2024-01-01T00:00:00",
            1704067200,
            1704067200.0,
            1704067200000,
            "1704067200",
            "1704067200000",
            "20240101",
            "20240101T000000Z",
            datetime(2024, 1, 1),
        ],
    )
    def test_equivalent_representations(self, value: object) -> None:
        assert parse_timestamp(value) == JAN_1

    def test_result_is_timezone_aware(self) -> None:
        assert parse_timestamp("2024-01-01T00:00:00").tzinfo is not None

    @pytest.mark.parametrize("value", [None, "", "   ", "yesterday", True, [], {}, "nan", float("inf")])
    def test_rejects_non_timestamps(self, value: object) -> None:
        with pytest.raises(ValueError):
            parse_timestamp(value)


# ------------------------------------------------------------------
# UpdateTimestamps
# ------------------------------------------------------------------


class TestUpdateTimestamps:
    def test_mixed_formats_compare_chronologically(self) -> None:
        # Lexically "2024-01-01..." < "999..." but chronologically it is later.
        later = UpdateTimestamps.model_validate({"verbiages": "2024-01-01T00:00:00Z", "terms": 0})
        earlier = UpdateTimestamps.model_validate({"verbiages": 999_999_999, "terms": 0})
        assert later.is_newer_than(earlier)
        assert not earlier.is_newer_than(later)

    def test_either_field_newer_is_enough(self) -> None:
        base = UpdateTimestamps(verbiages=JAN_1, terms=JAN_1)
        newer_terms = UpdateTimestamps(verbiages=JAN_1, terms=datetime(2024, 2, 1, tzinfo=UTC))
        older_verbiages = UpdateTimestamps(verbiages=datetime(2023, 1, 1, tzinfo=UTC), terms=datetime(2024, 2, 1, tzinfo=UTC))
        assert newer_terms.is_newer_than(base)
        assert older_verbiages.is_newer_than(base)

    def test_equal_is_not_newer(self) -> None:
        base = UpdateTimestamps(verbiages=JAN_1, terms=JAN_1)
        same = UpdateTimestamps.model_validate({"verbiages": "2024-01-01T00:00:00Z", "terms": 1704067200000})
        assert not same.is_newer_than(base)

    def test_raw_payload_is_kept(self) -> None:
        payload = {"verbiages": "2024-01-01T00:00:00Z", "terms": 1704067200, "extra": "ignored"}
        model = UpdateTimestamps.model_validate(payload)
        assert model.raw == payload

    def test_missing_field_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            UpdateTimestamps.model_validate({"verbiages": "2024-01-01T00:00:00Z"})

    def test_to_json_reloads_to_equal_values(self) -> None:
        model = UpdateTimestamps.model_validate({"verbiages": 1704067200000, "terms": "2024-03-01T12:00:00Z"})
        reloaded = UpdateTimestamps.model_validate(json.loads(model.to_json()))
        assert reloaded.verbiages == model.verbiages
        assert reloaded.terms == model.terms
        assert "raw" not in json.loads(model.to_json())


# ------------------------------------------------------------------
# Locale helpers
# ------------------------------------------------------------------


def test_parse_locale_set_handles_missing_and_empty() -> None:
    assert parse_locale_set(None) == []
    assert parse_locale_set("") == []
    assert parse_locale_set("en,se") == ["en", "se"]


def test_parse_locale_set_drops_empty_parts() -> None:
    assert parse_locale_set("en,") == ["en"]
    assert parse_locale_set("en,,se") == ["en", "se"]
    assert parse_locale_set(",") == []


def test_format_locale_set() -> None:
    assert format_locale_set(("en", "se")) == "en,se"


def test_same_locale_set_is_order_independent_and_duplicate_sensitive() -> None:
    assert same_locale_set(["se", "en"], ["en", "se"])
    assert not same_locale_set(["en", "en"], ["en"])
    assert not same_locale_set(["en"], ["en", "fr"])


def test_same_locale_set_does_not_mutate_inputs() -> None:
    left = ["se", "en"]
    right = ["fr", "en"]
    same_locale_set(left, right)
    assert left == ["se", "en"]
    assert right == ["fr", "en"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        ({}, False),
        ([], False),
        ([{"a": 1}], False),
        ("text", False),
        (5, False),
        ({"a": 1}, True),
    ],
)
def test_is_plain_payload(value: object, expected: bool) -> None:
    assert is_plain_payload(value) is expected
