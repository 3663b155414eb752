"""Logging context helpers and one-time logging setup."""

from __future__ import annotations

import logging
import contextlib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import Token, ContextVar

_TARGET: ContextVar[str] = ContextVar("target", default="-")


def set_log_context(*, target: str | None = None) -> list[tuple[ContextVar[str], Token[str]]]:
    """Set log context values and return tokens for reset."""
    tokens: list[tuple[ContextVar[str], Token[str]]] = []
    if target is not None:
        tokens.append((_TARGET, _TARGET.set(target)))
    return tokens


def reset_log_context(tokens: list[tuple[ContextVar[str], Token[str]]]) -> None:
    """Reset log context values using tokens returned by set_log_context."""
    for var, token in tokens:
        var.reset(token)


@contextmanager
def log_context(*, target: str | None = None) -> Iterator[None]:
    """Tag log records emitted inside the block with the record being bound."""
    tokens = set_log_context(target=target)
    try:
        yield
    finally:
        reset_log_context(tokens)


def current_target() -> str:
    """Return the record name currently being bound ("-" outside apply())."""
    return _TARGET.get()


def install_log_context() -> None:
    """Install a LogRecord factory that injects the ``target`` field."""
    if getattr(install_log_context, "_installed", False):
        return

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.target = _TARGET.get()
        return record

    logging.setLogRecordFactory(record_factory)
    install_log_context._installed = True  # type: ignore[attr-defined]


def configure_logging() -> None:
    """Initialize root logging configuration once per process."""
    from envconfig.config.logging import (  # noqa: PLC0415
        ENVCONFIG_LOG_LEVEL,
        ENVCONFIG_LOG_FORMAT,
        ENVCONFIG_LOG_DATEFMT,
    )

    install_log_context()
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=ENVCONFIG_LOG_LEVEL,
            format=ENVCONFIG_LOG_FORMAT,
            datefmt=ENVCONFIG_LOG_DATEFMT,
        )
    else:
        root_logger.setLevel(ENVCONFIG_LOG_LEVEL)
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(ENVCONFIG_LOG_LEVEL)
                handler.setFormatter(logging.Formatter(ENVCONFIG_LOG_FORMAT, datefmt=ENVCONFIG_LOG_DATEFMT))

    logging.getLogger("envconfig").setLevel(ENVCONFIG_LOG_LEVEL)


__all__ = [
    "configure_logging",
    "current_target",
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
]
