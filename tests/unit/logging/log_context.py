"""Unit tests for logging context helpers and populator debug records."""

from __future__ import annotations

import logging

import pytest

from envconfig import apply
from envconfig.logging import log_context, current_target, install_log_context
from tests.helpers.records import RequiredSettings


def test_log_context_sets_and_restores_target() -> None:
    assert current_target() == "-"
    with log_context(target="Outer"):
        assert current_target() == "Outer"
        with log_context(target="Inner"):
            assert current_target() == "Inner"
        assert current_target() == "Outer"
    assert current_target() == "-"


def test_installed_factory_tags_records() -> None:
    install_log_context()
    with log_context(target="Tagged"):
        record = logging.getLogRecordFactory()("envconfig", logging.INFO, __file__, 1, "msg", (), None)
    assert record.target == "Tagged"


def test_apply_logs_bound_and_skipped_fields(caplog: pytest.LogCaptureFixture) -> None:
    install_log_context()
    caplog.set_level(logging.DEBUG, logger="envconfig.populate")

    apply(RequiredSettings(), environ={"SVC_RETRIES": "2"})

    messages = [record.getMessage() for record in caplog.records]
    assert "bound region from SVC_REGION" in messages
    assert "skipping api_key: SVC_API_KEY is unset and has no default" in messages
    assert "bound retries from SVC_RETRIES" in messages
    assert {record.target for record in caplog.records} == {"RequiredSettings"}


def test_apply_does_not_log_values(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="envconfig.populate")
    apply(RequiredSettings(), environ={"SVC_API_KEY": "top-secret-value"})
    assert all("top-secret-value" not in record.getMessage() for record in caplog.records)
