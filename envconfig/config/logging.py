"""Logging configuration values."""

import os


ENVCONFIG_LOG_LEVEL = (os.getenv("ENVCONFIG_LOG_LEVEL", "WARNING") or "WARNING").upper()
ENVCONFIG_LOG_FORMAT = os.getenv(
    "ENVCONFIG_LOG_FORMAT",
    "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s",
)
ENVCONFIG_LOG_DATEFMT = os.getenv("ENVCONFIG_LOG_DATEFMT", "%Y-%m-%d %H:%M:%S")


__all__ = [
    "ENVCONFIG_LOG_LEVEL",
    "ENVCONFIG_LOG_FORMAT",
    "ENVCONFIG_LOG_DATEFMT",
]
