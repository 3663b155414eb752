"""Byte buffer coercion from standard base64."""

from __future__ import annotations

import base64
import binascii

from ..errors.coercion import CoercionError


def parse_base64(raw: str) -> bytes:
    """Decode standard-alphabet, padded base64 into bytes."""
    try:
        return base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise CoercionError("environment variable was not encoded in standard base64") from exc


__all__ = ["parse_base64"]
