"""Centralized exception classes for environment binding.

This module re-exports all binding exceptions from their respective
modules, providing a single import point for error handling.

Organization:
    - config.py: ConfigError base class
    - target.py: target is not a mutable record
    - missing.py: required variable unset with no default
    - kind.py: declared field type has no coercer
    - parse.py: raw value rejected by its coercer
    - coercion.py: coercer-level failure (wrapped by ParseError)
    - classify.py: Exception-to-label mapping
"""

from .kind import UnsupportedKindError
from .parse import ParseError
from .config import ConfigError
from .target import BadTargetError
from .missing import MissingRequiredError
from .classify import classify_error
from .coercion import CoercionError

__all__ = [
    # Base
    "ConfigError",
    # Binding failures
    "BadTargetError",
    "MissingRequiredError",
    "UnsupportedKindError",
    "ParseError",
    # Coercer
    "CoercionError",
    # Classification
    "classify_error",
]
