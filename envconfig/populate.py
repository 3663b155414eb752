"""Field populator: bind environment variables into a record.

apply() walks the record's descriptors in declaration order. For each bound
field the raw input is the environment value, else the declared default,
else empty. Empty input is skipped (or rejected under
with_error_on_missing()); anything else is coerced and written to the
attribute. The first failure stops the pass: fields before it keep their
new values and fields after it are never read.
"""

from __future__ import annotations

import logging
import dataclasses
from typing import Any, TypeVar
from collections.abc import Sequence

from .coerce import coerce
from .errors import (
    ParseError,
    BadTargetError,
    CoercionError,
    UnsupportedKindError,
    MissingRequiredError,
)
from .fields import FieldDescriptor, describe_fields
from .schema import Schema
from .logging import log_context
from .options import Options, ConfigOption, build_options
from .environment import EnvLookup, EnvSource, resolve_lookup

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def _check_target(target: Any, schema: Schema | None) -> None:
    if isinstance(target, type):
        raise BadTargetError("target must be a record instance, not a class")
    if dataclasses.is_dataclass(target):
        if target.__dataclass_params__.frozen:
            raise BadTargetError("target must be a mutable dataclass instance")
        return
    if schema is None:
        raise BadTargetError("target must be a dataclass instance")
    if not (hasattr(target, "__dict__") or hasattr(type(target), "__slots__")):
        raise BadTargetError("target must be a mutable object with attribute storage")


def _descriptors_for(target: Any, schema: Schema | None) -> Sequence[FieldDescriptor]:
    if schema is not None:
        return schema.descriptors
    return describe_fields(type(target))


def _bind_field(target: Any, descriptor: FieldDescriptor, lookup: EnvLookup, options: Options) -> None:
    variable = descriptor.variable_name
    raw = lookup(variable) or descriptor.default_value
    if not raw:
        if options.error_on_missing:
            raise MissingRequiredError(variable)
        logger.debug("skipping %s: %s is unset and has no default", descriptor.attribute, variable)
        return

    if descriptor.kind is None:
        raise UnsupportedKindError(variable, descriptor.type_name)

    try:
        value = coerce(descriptor.kind, raw)
    except CoercionError as exc:
        raise ParseError(variable, str(exc)) from exc

    setattr(target, descriptor.attribute, value)
    logger.debug("bound %s from %s", descriptor.attribute, variable)


def apply(
    target: Any,
    *options: ConfigOption,
    schema: Schema | None = None,
    environ: EnvSource = None,
) -> None:
    """Populate *target*'s bound fields from the environment.

    Args:
        target: Mutable dataclass instance, or any object with attribute
            storage when *schema* is given.
        *options: Option functions such as with_error_on_missing().
        schema: Explicit bindings; defaults to the dataclass field metadata.
        environ: Mapping or ``lookup(name) -> str`` callable; defaults to
            the process environment.

    Raises:
        BadTargetError: *target* is a class, frozen, or not a record.
        MissingRequiredError: A bound variable is missing under
            with_error_on_missing().
        UnsupportedKindError: A bound field with a value has no coercer.
        ParseError: A value does not match its field's grammar.
    """
    built = build_options(*options)
    _check_target(target, schema)
    lookup = resolve_lookup(environ)

    with log_context(target=type(target).__qualname__):
        for descriptor in _descriptors_for(target, schema):
            if not descriptor.variable_name:
                continue
            _bind_field(target, descriptor, lookup, built)


def load(
    record_type: type[RecordT],
    *options: ConfigOption,
    environ: EnvSource = None,
) -> RecordT:
    """Build ``record_type()`` with its zero values and apply() the environment to it."""
    record = record_type()
    apply(record, *options, environ=environ)
    return record


__all__ = ["apply", "load"]
