"""Integer and float coercion."""

from __future__ import annotations

import re
import math
import struct

from ..config.coercion import (
    FLOAT_PATTERN,
    INTEGER_PATTERN,
    DEFAULT_FLOAT_WIDTH,
    DEFAULT_INTEGER_WIDTH,
    FLOAT_SPECIAL_PATTERN,
)
from ..errors.coercion import CoercionError

_INTEGER_RE = re.compile(INTEGER_PATTERN)
_FLOAT_RE = re.compile(FLOAT_PATTERN)
_FLOAT_SPECIAL_RE = re.compile(FLOAT_SPECIAL_PATTERN, re.IGNORECASE)


def _integer_bounds(width: int) -> tuple[int, int]:
    return -(2 ** (width - 1)), 2 ** (width - 1) - 1


def _round_to_single(value: float, raw: str) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise CoercionError(f"value out of range for float32: {raw!r}") from exc


def parse_integer(raw: str, width: int = DEFAULT_INTEGER_WIDTH) -> int:
    """Parse a base-10 signed integer that must fit in *width* bits.

    Overflow is an error; values are never truncated to the width.
    """
    if not _INTEGER_RE.fullmatch(raw):
        raise CoercionError(f"invalid syntax for integer: {raw!r}")
    value = int(raw, 10)
    low, high = _integer_bounds(width)
    if value < low or value > high:
        raise CoercionError(f"value out of range for int{width}: {raw!r}")
    return value


def parse_float(raw: str, width: int = DEFAULT_FLOAT_WIDTH) -> float:
    """Parse a decimal float (scientific notation accepted).

    ``inf``, ``infinity`` and ``nan`` are accepted in any case with an
    optional sign. A finite literal too large for *width* is an error.
    Width 32 rounds the result to single precision.
    """
    special = bool(_FLOAT_SPECIAL_RE.fullmatch(raw))
    if not special and not _FLOAT_RE.fullmatch(raw):
        raise CoercionError(f"invalid syntax for float: {raw!r}")
    value = float(raw)
    if not special and math.isinf(value):
        raise CoercionError(f"value out of range for float{width}: {raw!r}")
    if width == 32:
        return _round_to_single(value, raw)
    return value


__all__ = ["parse_integer", "parse_float"]
