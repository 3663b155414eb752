"""Command-line constants for envconfig.scripts.check."""

CHECK_TARGET_SEPARATOR = ":"  # MODULE:CLASS

CHECK_EXIT_OK = 0
CHECK_EXIT_CONFIG_ERROR = 1  # Binding failed (ConfigError)
CHECK_EXIT_USAGE = 2  # Target could not be imported or built

CHECK_JSON_INDENT = 2


__all__ = [
    "CHECK_TARGET_SEPARATOR",
    "CHECK_EXIT_OK",
    "CHECK_EXIT_CONFIG_ERROR",
    "CHECK_EXIT_USAGE",
    "CHECK_JSON_INDENT",
]
