"""Bad-target exception."""

from .config import ConfigError


class BadTargetError(ConfigError):
    """Raised when the target is not a mutable record instance.

    No field is touched when this is raised.
    """


__all__ = ["BadTargetError"]
