"""Bind a dataclass from the environment and print the bound values.

Useful for checking a deployment's environment before starting a service.

Usage:
    python -m envconfig.scripts.check myapp.settings:Settings
    python -m envconfig.scripts.check myapp.settings:Settings --error-on-missing --env-file .env

Exit codes: 0 bound, 1 binding failed, 2 the target could not be loaded.
"""

from __future__ import annotations

import sys
import json
import base64
import argparse
import importlib
import dataclasses
from typing import Any
from datetime import timedelta
from collections.abc import Sequence

from envconfig.config.cli import (
    CHECK_EXIT_OK,
    CHECK_EXIT_USAGE,
    CHECK_JSON_INDENT,
    CHECK_TARGET_SEPARATOR,
    CHECK_EXIT_CONFIG_ERROR,
)
from envconfig.errors import ConfigError, classify_error
from envconfig.logging import configure_logging
from envconfig.options import with_error_on_missing
from envconfig.populate import apply
from envconfig.environment import load_env_file


def _load_record_type(target: str) -> type:
    module_name, separator, class_name = target.partition(CHECK_TARGET_SEPARATOR)
    if not separator or not module_name or not class_name:
        raise ValueError(f"expected MODULE{CHECK_TARGET_SEPARATOR}CLASS, got {target!r}")
    module = importlib.import_module(module_name)
    record_type = getattr(module, class_name)
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise ValueError(f"{target} is not a dataclass")
    return record_type


def _jsonable(value: Any) -> Any:
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, timedelta):
        return value.total_seconds()
    return value


def _record_summary(record: Any) -> dict[str, Any]:
    return {field.name: _jsonable(getattr(record, field.name)) for field in dataclasses.fields(record)}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bind a dataclass from the environment and print it as JSON")
    parser.add_argument("target", help="Record to bind, as MODULE:CLASS")
    parser.add_argument(
        "--error-on-missing",
        action="store_true",
        help="Fail when a bound variable is unset and has no default",
    )
    parser.add_argument("--env-file", help="dotenv file merged under the process environment")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)
    configure_logging()

    try:
        record_type = _load_record_type(args.target)
        environ = load_env_file(args.env_file) if args.env_file else None
        record = record_type()
    except (ImportError, AttributeError, ValueError, TypeError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return CHECK_EXIT_USAGE

    options = [with_error_on_missing()] if args.error_on_missing else []
    try:
        apply(record, *options, environ=environ)
    except ConfigError as exc:
        print(f"{classify_error(exc)}: {exc}", file=sys.stderr)
        return CHECK_EXIT_CONFIG_ERROR

    print(json.dumps(_record_summary(record), indent=CHECK_JSON_INDENT, default=str))
    return CHECK_EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
