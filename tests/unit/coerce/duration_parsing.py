"""Unit tests for ``<integer><unit>`` duration coercion."""

from __future__ import annotations

from datetime import timedelta

import pytest

from envconfig.coerce import coerce, to_timedelta, parse_duration
from envconfig.kinds import DurationKind
from envconfig.errors import CoercionError

_SECOND = 1_000_000_000
_HOUR = 3600 * _SECOND


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("3w", 3 * 7 * 24 * _HOUR),
        ("2d", 2 * 24 * _HOUR),
        ("2h", 2 * _HOUR),
        ("2m", 2 * 60 * _SECOND),
        ("2s", 2 * _SECOND),
        ("2ms", 2_000_000),
        ("2us", 2_000),
        ("2ns", 2),
        ("0s", 0),
    ],
)
def test_each_unit_yields_exact_nanoseconds(raw: str, expected: int) -> None:
    assert parse_duration(raw) == expected


def test_week_is_seven_days() -> None:
    assert parse_duration("1w") == 7 * parse_duration("1d") == 168 * parse_duration("1h")


@pytest.mark.parametrize("raw", ["100", "2W", "2H", "2hours", "2sec", "1h30m", "2 s", "2.5s"])
def test_unknown_units_are_rejected(raw: str) -> None:
    with pytest.raises(CoercionError, match="unknown unit"):
        parse_duration(raw)


def test_digits_only_reports_empty_unit() -> None:
    with pytest.raises(CoercionError, match="unknown unit: ''"):
        parse_duration("100")


@pytest.mark.parametrize("raw", ["ms", "-5s", "+5s", "h2"])
def test_missing_magnitude_is_rejected(raw: str) -> None:
    with pytest.raises(CoercionError, match="no magnitude"):
        parse_duration(raw)


def test_magnitude_beyond_int64_is_rejected() -> None:
    with pytest.raises(CoercionError, match="magnitude out of range"):
        parse_duration("9223372036854775808ns")


def test_largest_nanosecond_count_is_accepted() -> None:
    assert parse_duration("9223372036854775807ns") == 2**63 - 1


def test_product_overflow_is_rejected() -> None:
    with pytest.raises(CoercionError, match="overflows int64"):
        parse_duration("15251w")


def test_timedelta_truncates_below_microseconds() -> None:
    assert to_timedelta(1_500_999) == timedelta(microseconds=1500)
    assert to_timedelta(2) == timedelta(0)


def test_duration_kind_selects_representation() -> None:
    assert coerce(DurationKind(), "90s") == 90 * _SECOND
    assert coerce(DurationKind(as_timedelta=True), "90s") == timedelta(seconds=90)
