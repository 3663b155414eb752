"""Bind environment variables into typed dataclass fields.

Declare bindings with field metadata and call apply() on an instance.
The second env_field() argument is the env default string; ``default=`` is
the ordinary dataclass default, kept when neither is set::

    from dataclasses import dataclass
    from envconfig import Int32, Nanoseconds, apply, env_field, with_error_on_missing

    @dataclass
    class Settings:
        workers: Int32 = env_field("APP_WORKERS", "4", default=0)
        timeout: Nanoseconds = env_field("APP_TIMEOUT", "30s", default=0)
        api_key: str = env_field("APP_API_KEY", default="")

    settings = Settings()
    apply(settings, with_error_on_missing())

Supported kinds: integers (8/16/32/64-bit), floats (32/64-bit), booleans
(t/true/1, f/false/0), strings, base64 byte buffers and ``<n><unit>``
durations (ns, us, ms, s, m, h, d, w).

Layout:
    - populate.py: apply() / load(), the field populator
    - coerce/: value coercers, one per kind
    - kinds.py: the closed kind variants and Annotated aliases
    - fields.py: dataclass metadata provider and env_field()
    - schema.py: explicit binding builder
    - environment.py: environment lookups and dotenv loading
    - options.py: per-call options
    - errors/: exception hierarchy
    - config/: declarative constants
    - scripts/check.py: command-line binding check
"""

from .kinds import (
    Int8,
    Int16,
    Int32,
    Int64,
    Float32,
    Float64,
    BoolKind,
    FieldKind,
    FloatKind,
    Nanoseconds,
    StringKind,
    IntegerKind,
    DurationKind,
    ByteBufferKind,
)
from .errors import (
    ParseError,
    ConfigError,
    BadTargetError,
    CoercionError,
    UnsupportedKindError,
    MissingRequiredError,
    classify_error,
)
from .fields import FieldDescriptor, env_field, resolve_kind, describe_fields
from .schema import Schema
from .options import Options, ConfigOption, with_error_on_missing
from .populate import load, apply
from .environment import load_env_file

__all__ = [
    # Entry points
    "apply",
    "load",
    "with_error_on_missing",
    "Options",
    "ConfigOption",
    # Declaration
    "env_field",
    "Schema",
    "FieldDescriptor",
    "describe_fields",
    "resolve_kind",
    "load_env_file",
    # Kinds
    "FieldKind",
    "IntegerKind",
    "FloatKind",
    "BoolKind",
    "StringKind",
    "ByteBufferKind",
    "DurationKind",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Float32",
    "Float64",
    "Nanoseconds",
    # Errors
    "ConfigError",
    "BadTargetError",
    "MissingRequiredError",
    "UnsupportedKindError",
    "ParseError",
    "CoercionError",
    "classify_error",
]
