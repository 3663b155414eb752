"""Unsupported-field-kind exception."""

from .config import ConfigError


class UnsupportedKindError(ConfigError):
    """Raised when a bound field's declared type has no coercer.

    Attributes:
        type_name: Printable form of the declared field type.
    """

    def __init__(self, variable_name: str, type_name: str) -> None:
        super().__init__(
            f"unexpected field type {type_name} for env var {variable_name}",
            variable_name=variable_name,
        )
        self.type_name = type_name


__all__ = ["UnsupportedKindError"]
