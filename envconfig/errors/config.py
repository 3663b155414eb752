"""Base exception for environment binding failures."""


class ConfigError(Exception):
    """Raised by apply() when a record cannot be bound from the environment.

    Every binding failure derives from this class so callers can catch one
    type. Subclasses identify the failure category.

    Attributes:
        variable_name: Environment variable the failure concerns, or None
            when the failure is not tied to a single field.
        message: Human-readable error description.
    """

    def __init__(self, message: str, *, variable_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.variable_name = variable_name


__all__ = ["ConfigError"]
