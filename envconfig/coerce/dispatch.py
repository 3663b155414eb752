"""Kind dispatch for the value coercers."""

from __future__ import annotations

from datetime import timedelta

from ..kinds import (
    BoolKind,
    FieldKind,
    FloatKind,
    StringKind,
    IntegerKind,
    DurationKind,
    ByteBufferKind,
)
from .buffer import parse_base64
from .boolean import parse_bool
from .numeric import parse_float, parse_integer
from .duration import to_timedelta, parse_duration

CoercedValue = int | float | bool | str | bytes | timedelta


def _coerce_duration(kind: DurationKind, raw: str) -> int | timedelta:
    nanoseconds = parse_duration(raw)
    return to_timedelta(nanoseconds) if kind.as_timedelta else nanoseconds


def coerce(kind: FieldKind, raw: str) -> CoercedValue:
    """Convert *raw* into the Python value for *kind*.

    Raises:
        CoercionError: *raw* does not match the grammar of *kind*.
        TypeError: *kind* is not one of the closed kind variants.
    """
    if isinstance(kind, IntegerKind):
        return parse_integer(raw, kind.width)
    if isinstance(kind, FloatKind):
        return parse_float(raw, kind.width)
    if isinstance(kind, BoolKind):
        return parse_bool(raw)
    if isinstance(kind, StringKind):
        return raw
    if isinstance(kind, ByteBufferKind):
        return parse_base64(raw)
    if isinstance(kind, DurationKind):
        return _coerce_duration(kind, raw)
    raise TypeError(f"unknown field kind: {kind!r}")


__all__ = ["CoercedValue", "coerce"]
