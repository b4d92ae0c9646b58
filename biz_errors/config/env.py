"""biz_errors.config.env
=====================

Centralized environment variable names and small parsing helpers for the
biz_errors package.

Purpose
-------
- Provide a single source of truth for the environment variables that tune
  logging and origin capture.
- Offer small utilities to read them consistently across modules.

Design Notes
------------
- Values are read on every call; there is no process cache, so tests can
  adjust the environment with ``monkeypatch`` at any time.
- Helpers are framework-agnostic and depend on the standard library only.

Failure Modes
-------------
- Helpers never raise on unset or malformed values; they fall back to the
  defaults in ``biz_errors.config.defaults``.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Union

from . import defaults

ENV_LOG_LEVEL = "BIZ_ERRORS_LOG_LEVEL"
ENV_EVENT_LEVEL = "BIZ_ERRORS_EVENT_LEVEL"
ENV_LOG_JSON = "BIZ_ERRORS_LOG_JSON"
ENV_CAPTURE_STACK = "BIZ_ERRORS_CAPTURE_STACK"
ENV_STACK_DEPTH = "BIZ_ERRORS_STACK_DEPTH"

_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    """Parse a logging level name into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    case-insensitively, or an integer level which is returned unchanged.
    Falls back to ``default`` on unknown values.
    """
    if isinstance(value, int):
        return value
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def parse_bool(value: Optional[str], default: bool) -> bool:
    """Interpret common truthy/falsy spellings; anything else yields ``default``."""
    if value is None:
        return default
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return default


def get_log_level() -> int:
    """Return the base logger level from ``BIZ_ERRORS_LOG_LEVEL``."""
    return parse_level(os.getenv(ENV_LOG_LEVEL), default=parse_level(defaults.DEFAULT_LOG_LEVEL))


def get_event_level() -> int:
    """Return the level used for wrap events from ``BIZ_ERRORS_EVENT_LEVEL``."""
    return parse_level(os.getenv(ENV_EVENT_LEVEL), default=parse_level(defaults.DEFAULT_EVENT_LEVEL))


def json_logging_enabled() -> bool:
    """Return whether the package logger should emit JSON lines."""
    return parse_bool(os.getenv(ENV_LOG_JSON), default=True)


def stack_capture_enabled() -> bool:
    """Return whether first wraps capture a stack summary for verbose output."""
    return parse_bool(os.getenv(ENV_CAPTURE_STACK), default=defaults.DEFAULT_CAPTURE_STACK)


def get_stack_depth() -> int:
    """Return the maximum number of frames kept per captured origin.

    Non-numeric or non-positive values fall back to ``DEFAULT_STACK_DEPTH``.
    """
    raw = os.getenv(ENV_STACK_DEPTH)
    if not raw:
        return defaults.DEFAULT_STACK_DEPTH
    try:
        val = int(raw)
    except ValueError:
        return defaults.DEFAULT_STACK_DEPTH
    return val if val > 0 else defaults.DEFAULT_STACK_DEPTH


__all__ = [
    "ENV_LOG_LEVEL",
    "ENV_EVENT_LEVEL",
    "ENV_LOG_JSON",
    "ENV_CAPTURE_STACK",
    "ENV_STACK_DEPTH",
    "parse_level",
    "parse_bool",
    "get_log_level",
    "get_event_level",
    "json_logging_enabled",
    "stack_capture_enabled",
    "get_stack_depth",
]
