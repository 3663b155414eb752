"""Explicit field registration.

Schema is the builder form of the metadata provider: each binding is
registered by hand instead of being read from dataclass metadata, so plain
classes (or dataclasses whose declaration cannot be changed) can be bound::

    schema = (
        Schema()
        .bind("host", "DB_HOST", "localhost", kind=StringKind())
        .bind("port", "DB_PORT", "5432", kind=IntegerKind(16))
    )
    apply(settings, schema=schema)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .kinds import FieldKind, is_field_kind
from .fields import FieldDescriptor, describe_fields


class Schema:
    """Ordered, attribute-unique collection of FieldDescriptors."""

    def __init__(self, descriptors: Iterable[FieldDescriptor] = ()) -> None:
        self._descriptors: list[FieldDescriptor] = []
        for descriptor in descriptors:
            self._add(descriptor)

    @classmethod
    def from_dataclass(cls, record_type: type) -> Schema:
        """Build a schema from a dataclass's field metadata."""
        return cls(describe_fields(record_type))

    def _add(self, descriptor: FieldDescriptor) -> None:
        if any(existing.attribute == descriptor.attribute for existing in self._descriptors):
            raise ValueError(f"attribute {descriptor.attribute!r} is already bound")
        self._descriptors.append(descriptor)

    def bind(self, attribute: str, variable: str, default: str = "", *, kind: FieldKind) -> Schema:
        """Register *attribute* as bound to *variable*; returns self for chaining."""
        if not is_field_kind(kind):
            raise TypeError(f"kind must be a field kind variant, got {kind!r}")
        self._add(
            FieldDescriptor(
                attribute=attribute,
                variable_name=variable,
                default_value=default,
                kind=kind,
                type_name=type(kind).__name__,
            )
        )
        return self

    @property
    def descriptors(self) -> tuple[FieldDescriptor, ...]:
        return tuple(self._descriptors)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


__all__ = ["Schema"]
