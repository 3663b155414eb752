"""Environment accessors.

apply() reads variables through a ``lookup(name) -> str`` callable where an
empty string means the variable is absent. This module builds such callables
from the process environment, from a mapping, or from a dotenv file.
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Callable, Mapping

from dotenv import dotenv_values

EnvLookup = Callable[[str], str]
EnvSource = Mapping[str, str] | EnvLookup | None


def os_lookup(name: str) -> str:
    """Read *name* from the process environment ("" when unset)."""
    return os.environ.get(name, "")


def mapping_lookup(mapping: Mapping[str, str]) -> EnvLookup:
    """Return a lookup reading from *mapping* ("" when absent)."""

    def _lookup(name: str) -> str:
        return mapping.get(name) or ""

    return _lookup


def resolve_lookup(environ: EnvSource) -> EnvLookup:
    """Normalize the ``environ`` argument of apply() into a lookup callable."""
    if environ is None:
        return os_lookup
    if isinstance(environ, Mapping):
        return mapping_lookup(environ)
    if callable(environ):
        return environ
    raise TypeError(f"environ must be a mapping or a lookup callable, got {type(environ).__name__}")


def load_env_file(path: str | os.PathLike[str], *, override: bool = False) -> dict[str, str]:
    """Read a dotenv file and merge it with the process environment.

    Process variables win over file values unless *override* is set, which
    mirrors ``load_dotenv`` without mutating ``os.environ``. Keys declared
    without a value in the file are ignored.

    Raises:
        FileNotFoundError: *path* does not exist.
    """
    env_path = Path(path)
    if not env_path.is_file():
        raise FileNotFoundError(f"env file not found: {env_path}")
    file_values = {key: value for key, value in dotenv_values(env_path).items() if value is not None}
    if override:
        return {**os.environ, **file_values}
    return {**file_values, **os.environ}


__all__ = [
    "EnvLookup",
    "EnvSource",
    "load_env_file",
    "mapping_lookup",
    "os_lookup",
    "resolve_lookup",
]
