"""Coercion grammar constants.

Centralizes the vocabularies and tables used by the value coercers in
envconfig/coerce/. Nothing here reads the environment.
"""

# =============================================================================
# NUMERIC WIDTHS
# =============================================================================

INTEGER_WIDTHS = (8, 16, 32, 64)
FLOAT_WIDTHS = (32, 64)

DEFAULT_INTEGER_WIDTH = 64
DEFAULT_FLOAT_WIDTH = 64

# Base-10 signed integer: optional sign, ASCII digits only
INTEGER_PATTERN = r"^[+-]?[0-9]+$"

# Decimal float with optional fraction and exponent (no hex, no underscores)
FLOAT_PATTERN = r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
FLOAT_SPECIAL_PATTERN = r"^[+-]?(?:inf|infinity|nan)$"  # Matched case-insensitively

# =============================================================================
# BOOLEANS
# =============================================================================

# Closed vocabulary, matched after lowercasing
BOOL_TRUE_VALUES = frozenset({"t", "true", "1"})
BOOL_FALSE_VALUES = frozenset({"f", "false", "0"})

# =============================================================================
# DURATIONS
# =============================================================================

_NS = 1
_US = 1_000 * _NS
_MS = 1_000 * _US
_SECOND = 1_000 * _MS
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY

# Unit suffix -> nanoseconds; case-sensitive, one unit per string
DURATION_UNITS_NS = {
    "ns": _NS,
    "us": _US,
    "ms": _MS,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
    "d": _DAY,
    "w": _WEEK,
}

INT64_MAX = 2**63 - 1

NANOSECONDS_PER_MICROSECOND = _US


__all__ = [
    "INTEGER_WIDTHS",
    "FLOAT_WIDTHS",
    "DEFAULT_INTEGER_WIDTH",
    "DEFAULT_FLOAT_WIDTH",
    "INTEGER_PATTERN",
    "FLOAT_PATTERN",
    "FLOAT_SPECIAL_PATTERN",
    "BOOL_TRUE_VALUES",
    "BOOL_FALSE_VALUES",
    "DURATION_UNITS_NS",
    "INT64_MAX",
    "NANOSECONDS_PER_MICROSECOND",
]
