"""Field metadata provider for dataclass records.

Bindings are declared with dataclass field metadata: ``"env"`` names the
environment variable, ``"default"`` holds a literal default string and
``"kind"`` optionally overrides the kind inferred from the annotation.
env_field() builds such a field. Its second argument is the env default
string; ``default=`` goes to ``dataclasses.field`` and is the value the
attribute keeps when nothing is bound::

    @dataclass
    class Settings:
        port: Int16 = env_field("PORT", "8080", default=0)
        debug: bool = env_field("DEBUG", default=False)

describe_fields() turns a dataclass type into the ordered FieldDescriptor
list consumed by apply().
"""

from __future__ import annotations

import sys
import types
import inspect
import dataclasses
from datetime import timedelta
from typing import Any, Union, Annotated, get_args, get_origin, get_type_hints

from .kinds import (
    BoolKind,
    FieldKind,
    FloatKind,
    StringKind,
    IntegerKind,
    DurationKind,
    ByteBufferKind,
    is_field_kind,
)
from .config.fields import ENV_METADATA_KEY, KIND_METADATA_KEY, DEFAULT_METADATA_KEY

_BASE_KINDS: dict[type, FieldKind] = {
    bool: BoolKind(),
    int: IntegerKind(),
    float: FloatKind(),
    str: StringKind(),
    bytes: ByteBufferKind(),
    timedelta: DurationKind(as_timedelta=True),
}


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """Static binding metadata for one record attribute.

    Attributes:
        attribute: Attribute written on the target.
        variable_name: Environment variable; empty means the field is not bound.
        default_value: Literal used when the variable is unset or empty.
        kind: Coercion kind, or None when the declared type is unsupported.
        type_name: Printable declared type, used in error messages.
    """

    attribute: str
    variable_name: str
    default_value: str = ""
    kind: FieldKind | None = None
    type_name: str = ""


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) not in (Union, types.UnionType):
        return annotation
    members = [arg for arg in get_args(annotation) if arg is not type(None)]
    return members[0] if len(members) == 1 else annotation


def _is_plain_class(annotation: Any) -> bool:
    return get_origin(annotation) is None and isinstance(annotation, type)


def _type_name(annotation: Any) -> str:
    if _is_plain_class(annotation):
        return annotation.__qualname__
    return str(annotation)


def _metadata_string(metadata: Any, key: str) -> str:
    value = metadata.get(key)
    return "" if value is None else str(value)


def _annotation_owner(record_type: type, name: str) -> type:
    for owner in record_type.__mro__:
        if name in inspect.get_annotations(owner):
            return owner
    return record_type


def _field_hint(record_type: type, field: dataclasses.Field) -> Any:
    if not isinstance(field.type, str):
        return field.type
    owner = _annotation_owner(record_type, field.name)
    module = sys.modules.get(owner.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    try:
        return eval(field.type, globalns, dict(vars(owner)))  # noqa: S307
    except (NameError, TypeError, AttributeError, SyntaxError):
        return field.type


def _record_hints(record_type: type) -> dict[str, Any]:
    try:
        return get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError, AttributeError, SyntaxError):
        pass
    # One unresolvable annotation: evaluate the rest field by field
    return {field.name: _field_hint(record_type, field) for field in dataclasses.fields(record_type)}


def resolve_kind(annotation: Any) -> FieldKind | None:
    """Return the kind for a declared annotation, or None if unsupported.

    ``Annotated`` metadata wins over the base type, ``Optional[T]`` resolves
    as ``T``, and only exact base types are recognized (an ``IntEnum`` is
    not an ``int`` here).
    """
    annotation = _unwrap_optional(annotation)
    if get_origin(annotation) is Annotated:
        for extra in annotation.__metadata__:
            if is_field_kind(extra):
                return extra
        return resolve_kind(get_args(annotation)[0])
    if _is_plain_class(annotation):
        return _BASE_KINDS.get(annotation)
    return None


def env_field(
    variable: str,
    env_default: str = "",
    *,
    kind: FieldKind | None = None,
    **field_kwargs: Any,
) -> Any:
    """Declare a dataclass field bound to environment variable *variable*.

    Args:
        variable: Environment variable name.
        env_default: Literal string coerced when the variable is unset or
            empty. Unrelated to ``default=``, which is the dataclass
            attribute default kept when nothing is bound.
        kind: Optional kind override; inferred from the annotation otherwise.
        **field_kwargs: Forwarded to ``dataclasses.field`` (``default``,
            ``default_factory``, ``repr``, ...).

    Returns:
        A ``dataclasses.field`` carrying the binding metadata.
    """
    if kind is not None and not is_field_kind(kind):
        raise TypeError(f"kind must be a field kind variant, got {kind!r}")
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[ENV_METADATA_KEY] = variable
    metadata[DEFAULT_METADATA_KEY] = env_default
    if kind is not None:
        metadata[KIND_METADATA_KEY] = kind
    return dataclasses.field(metadata=metadata, **field_kwargs)


def describe_fields(record_type: type) -> list[FieldDescriptor]:
    """Return descriptors for every field of dataclass *record_type*, in order.

    Fields without an ``"env"`` entry are included with an empty variable
    name so callers can see the full shape; apply() skips them.
    """
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise TypeError(f"expected a dataclass type, got {record_type!r}")
    hints = _record_hints(record_type)
    descriptors: list[FieldDescriptor] = []
    for field in dataclasses.fields(record_type):
        annotation = hints.get(field.name, field.type)
        override = field.metadata.get(KIND_METADATA_KEY)
        descriptors.append(
            FieldDescriptor(
                attribute=field.name,
                variable_name=_metadata_string(field.metadata, ENV_METADATA_KEY),
                default_value=_metadata_string(field.metadata, DEFAULT_METADATA_KEY),
                kind=override if is_field_kind(override) else resolve_kind(annotation),
                type_name=_type_name(annotation),
            )
        )
    return descriptors


__all__ = [
    "FieldDescriptor",
    "describe_fields",
    "env_field",
    "resolve_kind",
]
