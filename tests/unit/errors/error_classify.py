"""Unit tests for exception-to-label classification."""

from __future__ import annotations

from envconfig.errors import (
    ParseError,
    ConfigError,
    BadTargetError,
    CoercionError,
    UnsupportedKindError,
    MissingRequiredError,
    classify_error,
)


def test_classify_error_known_categories() -> None:
    assert classify_error(BadTargetError("target must be a dataclass instance")) == "bad_target"
    assert classify_error(MissingRequiredError("APP_KEY")) == "missing_required"
    assert classify_error(UnsupportedKindError("APP_TAGS", "list[str]")) == "unsupported_kind"
    assert classify_error(ParseError("APP_PORT", "invalid syntax")) == "parse"


def test_classify_error_defaults_to_unknown() -> None:
    assert classify_error(ConfigError("generic")) == "unknown"
    assert classify_error(CoercionError("raw failure")) == "unknown"
    assert classify_error(RuntimeError("boom")) == "unknown"


def test_error_attributes() -> None:
    err = UnsupportedKindError("APP_TAGS", "list[str]")
    assert err.variable_name == "APP_TAGS"
    assert err.type_name == "list[str]"
    assert err.message == "unexpected field type list[str] for env var APP_TAGS"
    assert BadTargetError("x").variable_name is None
