"""Missing-required-variable exception."""

from .config import ConfigError


class MissingRequiredError(ConfigError):
    """Raised when a bound variable is unset, has no default, and missing is an error."""

    def __init__(self, variable_name: str) -> None:
        super().__init__(
            f"env var {variable_name} was not provided and has no default",
            variable_name=variable_name,
        )


__all__ = ["MissingRequiredError"]
