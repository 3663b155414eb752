"""Aggregator of configuration modules.

This module re-exports the declarative settings from smaller modules:
- coercion: widths, boolean vocabularies, duration units
- logging: log level and format for configure_logging()
- fields: dataclass metadata keys
- cli: exit codes for the check script
"""

from .coercion import (
    INTEGER_WIDTHS,
    FLOAT_WIDTHS,
    DEFAULT_INTEGER_WIDTH,
    DEFAULT_FLOAT_WIDTH,
    INTEGER_PATTERN,
    FLOAT_PATTERN,
    FLOAT_SPECIAL_PATTERN,
    BOOL_TRUE_VALUES,
    BOOL_FALSE_VALUES,
    DURATION_UNITS_NS,
    INT64_MAX,
    NANOSECONDS_PER_MICROSECOND,
)
from .logging import (
    ENVCONFIG_LOG_LEVEL,
    ENVCONFIG_LOG_FORMAT,
    ENVCONFIG_LOG_DATEFMT,
)
from .fields import (
    ENV_METADATA_KEY,
    DEFAULT_METADATA_KEY,
    KIND_METADATA_KEY,
)
from .cli import (
    CHECK_TARGET_SEPARATOR,
    CHECK_EXIT_OK,
    CHECK_EXIT_CONFIG_ERROR,
    CHECK_EXIT_USAGE,
    CHECK_JSON_INDENT,
)

__all__ = [
    # coercion
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
    # logging
    "ENVCONFIG_LOG_LEVEL",
    "ENVCONFIG_LOG_FORMAT",
    "ENVCONFIG_LOG_DATEFMT",
    # fields
    "ENV_METADATA_KEY",
    "DEFAULT_METADATA_KEY",
    "KIND_METADATA_KEY",
    # cli
    "CHECK_TARGET_SEPARATOR",
    "CHECK_EXIT_OK",
    "CHECK_EXIT_CONFIG_ERROR",
    "CHECK_EXIT_USAGE",
    "CHECK_JSON_INDENT",
]
