"""Options for a single apply() call."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Callable


@dataclass
class Options:
    """Per-call binding options.

    Attributes:
        error_on_missing: Raise MissingRequiredError when a bound variable is
            unset and has no default, instead of leaving the field alone.
    """

    error_on_missing: bool = False


ConfigOption = Callable[[Options], None]


def with_error_on_missing() -> ConfigOption:
    """Make apply() fail when any bound variable is missing and has no default."""

    def _set(options: Options) -> None:
        options.error_on_missing = True

    return _set


def build_options(*options: ConfigOption) -> Options:
    """Apply option functions, in order, to a fresh Options."""
    built = Options()
    for option in options:
        option(built)
    return built


__all__ = [
    "ConfigOption",
    "Options",
    "build_options",
    "with_error_on_missing",
]
