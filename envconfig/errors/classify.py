"""Exception classification helpers for reporting labels."""

from __future__ import annotations

from .kind import UnsupportedKindError
from .parse import ParseError
from .target import BadTargetError
from .missing import MissingRequiredError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (BadTargetError, "bad_target"),
    (MissingRequiredError, "missing_required"),
    (UnsupportedKindError, "unsupported_kind"),
    (ParseError, "parse"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a short category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
