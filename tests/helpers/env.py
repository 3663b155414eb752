"""Environment helpers for tests that read the real process environment."""

from __future__ import annotations

import pytest

from tests.helpers.records import SERVICE_ENV_VARS


def clear_service_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every SVC_* variable the sample records bind."""
    for name in SERVICE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
