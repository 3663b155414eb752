"""Parse failure exception wrapping a coercion error."""

from .config import ConfigError


class ParseError(ConfigError):
    """Raised when a raw value does not match the grammar of its field kind.

    The underlying CoercionError is chained as ``__cause__``.

    Attributes:
        reason: The coercer's description of the failure.
    """

    def __init__(self, variable_name: str, reason: str) -> None:
        super().__init__(
            f"parse error for env var {variable_name}: {reason}",
            variable_name=variable_name,
        )
        self.reason = reason


__all__ = ["ParseError"]
