"""Field kinds understood by the value coercers.

The set is closed: every bindable field resolves to exactly one of the
variants below, and the coercer has one handler per variant. Declared types
outside this set are reported as unsupported when they are reached.

The Annotated aliases at the bottom let a record pick a width or the
nanosecond duration form without repeating the kind on every field::

    @dataclass
    class Settings:
        workers: Int8 = env_field("WORKERS", "4", default=0)
        timeout: Nanoseconds = env_field("TIMEOUT", "30s", default=0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Union

from .config.coercion import FLOAT_WIDTHS, INTEGER_WIDTHS, DEFAULT_FLOAT_WIDTH, DEFAULT_INTEGER_WIDTH


@dataclass(frozen=True)
class IntegerKind:
    """Base-10 signed integer that must fit in ``width`` bits."""

    width: int = DEFAULT_INTEGER_WIDTH

    def __post_init__(self) -> None:
        if self.width not in INTEGER_WIDTHS:
            raise ValueError(f"integer width must be one of {INTEGER_WIDTHS}, got {self.width}")


@dataclass(frozen=True)
class FloatKind:
    """Decimal floating point stored at ``width`` bits of precision."""

    width: int = DEFAULT_FLOAT_WIDTH

    def __post_init__(self) -> None:
        if self.width not in FLOAT_WIDTHS:
            raise ValueError(f"float width must be one of {FLOAT_WIDTHS}, got {self.width}")


@dataclass(frozen=True)
class BoolKind:
    """Closed boolean vocabulary (t/true/1, f/false/0)."""


@dataclass(frozen=True)
class StringKind:
    """Raw string, stored unchanged."""


@dataclass(frozen=True)
class ByteBufferKind:
    """Standard base64 text decoded to bytes."""


@dataclass(frozen=True)
class DurationKind:
    """``<integer><unit>`` duration.

    Stored as integer nanoseconds, or as a ``datetime.timedelta`` when
    ``as_timedelta`` is set.
    """

    as_timedelta: bool = False


FieldKind = Union[IntegerKind, FloatKind, BoolKind, StringKind, ByteBufferKind, DurationKind]
FIELD_KIND_TYPES: tuple[type, ...] = (
    IntegerKind,
    FloatKind,
    BoolKind,
    StringKind,
    ByteBufferKind,
    DurationKind,
)

Int8 = Annotated[int, IntegerKind(8)]
Int16 = Annotated[int, IntegerKind(16)]
Int32 = Annotated[int, IntegerKind(32)]
Int64 = Annotated[int, IntegerKind(64)]
Float32 = Annotated[float, FloatKind(32)]
Float64 = Annotated[float, FloatKind(64)]
Nanoseconds = Annotated[int, DurationKind()]


def is_field_kind(value: object) -> bool:
    """Return True when *value* is one of the closed kind variants."""
    return isinstance(value, FIELD_KIND_TYPES)


__all__ = [
    "IntegerKind",
    "FloatKind",
    "BoolKind",
    "StringKind",
    "ByteBufferKind",
    "DurationKind",
    "FieldKind",
    "FIELD_KIND_TYPES",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Float32",
    "Float64",
    "Nanoseconds",
    "is_field_kind",
]
