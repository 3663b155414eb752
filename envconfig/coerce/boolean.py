"""Boolean coercion over a closed vocabulary."""

from __future__ import annotations

from ..config.coercion import BOOL_TRUE_VALUES, BOOL_FALSE_VALUES
from ..errors.coercion import CoercionError


def parse_bool(raw: str) -> bool:
    """Map t/true/1 to True and f/false/0 to False, ignoring case.

    Anything else (including yes/no/on/off) is rejected.
    """
    lowered = raw.lower()
    if lowered in BOOL_TRUE_VALUES:
        return True
    if lowered in BOOL_FALSE_VALUES:
        return False
    raise CoercionError("string was not clearly representative of a boolean value")


__all__ = ["parse_bool"]
