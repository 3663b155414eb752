"""Duration coercion for ``<integer><unit>`` strings.

The string is split at the first character outside ``0-9``: the prefix is
the magnitude and the remainder must be exactly one unit token. There are
no plurals, no combined units (``1h30m``) and no signs.
"""

from __future__ import annotations

from datetime import timedelta

from ..config.coercion import INT64_MAX, DURATION_UNITS_NS, NANOSECONDS_PER_MICROSECOND
from ..errors.coercion import CoercionError


def _split_duration(raw: str) -> tuple[str, str]:
    for index, char in enumerate(raw):
        if not "0" <= char <= "9":
            return raw[:index], raw[index:]
    return raw, ""


def _parse_magnitude(scalar: str) -> int:
    if not scalar:
        raise CoercionError("duration string had no magnitude")
    value = int(scalar, 10)
    if value > INT64_MAX:
        raise CoercionError(f"duration magnitude out of range for int64: {scalar!r}")
    return value


def parse_duration(raw: str) -> int:
    """Return the duration described by *raw* in nanoseconds.

    The magnitude is checked before the unit, so ``"ms"`` reports a missing
    magnitude while ``"100"`` reports an unknown (empty) unit.

    Raises:
        CoercionError: Unparseable magnitude, unknown or missing unit, or a
            product that does not fit in a signed 64-bit nanosecond count.
    """
    scalar, unit = _split_duration(raw)
    magnitude = _parse_magnitude(scalar)
    unit_ns = DURATION_UNITS_NS.get(unit)
    if unit_ns is None:
        raise CoercionError(f"duration string had unknown unit: {unit!r}")
    nanoseconds = magnitude * unit_ns
    if nanoseconds > INT64_MAX:
        raise CoercionError(f"duration overflows int64 nanoseconds: {raw!r}")
    return nanoseconds


def to_timedelta(nanoseconds: int) -> timedelta:
    """Convert nanoseconds to a timedelta, truncating below one microsecond."""
    return timedelta(microseconds=nanoseconds // NANOSECONDS_PER_MICROSECOND)


__all__ = ["parse_duration", "to_timedelta"]
