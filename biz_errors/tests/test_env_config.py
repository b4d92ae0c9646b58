from __future__ import annotations

import logging

from biz_errors.config import defaults
from biz_errors.config.env import (
    ENV_CAPTURE_STACK,
    ENV_EVENT_LEVEL,
    ENV_LOG_JSON,
    ENV_LOG_LEVEL,
    ENV_STACK_DEPTH,
    get_event_level,
    get_log_level,
    get_stack_depth,
    json_logging_enabled,
    parse_bool,
    parse_level,
    stack_capture_enabled,
)


def test_parse_level_names_and_fallback():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warn ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR
    assert parse_level("loud", default=logging.INFO) == logging.INFO
    assert parse_level(None, default=logging.CRITICAL) == logging.CRITICAL


def test_parse_bool_spellings():
    assert parse_bool("YES", default=False) is True
    assert parse_bool("off", default=True) is False
    assert parse_bool("maybe", default=True) is True
    assert parse_bool(None, default=False) is False


def test_levels_default_when_unset(monkeypatch):
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_EVENT_LEVEL, raising=False)
    assert get_log_level() == logging.INFO
    assert get_event_level() == logging.ERROR


def test_levels_from_env(monkeypatch):
    monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
    monkeypatch.setenv(ENV_EVENT_LEVEL, "warning")
    assert get_log_level() == logging.DEBUG
    assert get_event_level() == logging.WARNING


def test_flags_from_env(monkeypatch):
    monkeypatch.delenv(ENV_LOG_JSON, raising=False)
    monkeypatch.delenv(ENV_CAPTURE_STACK, raising=False)
    assert json_logging_enabled() is True
    assert stack_capture_enabled() is defaults.DEFAULT_CAPTURE_STACK

    monkeypatch.setenv(ENV_LOG_JSON, "0")
    monkeypatch.setenv(ENV_CAPTURE_STACK, "no")
    assert json_logging_enabled() is False
    assert stack_capture_enabled() is False


def test_stack_depth(monkeypatch):
    monkeypatch.delenv(ENV_STACK_DEPTH, raising=False)
    assert get_stack_depth() == defaults.DEFAULT_STACK_DEPTH
    monkeypatch.setenv(ENV_STACK_DEPTH, "5")
    assert get_stack_depth() == 5
    for bad in ("0", "-3", "many"):
        monkeypatch.setenv(ENV_STACK_DEPTH, bad)
        assert get_stack_depth() == defaults.DEFAULT_STACK_DEPTH
