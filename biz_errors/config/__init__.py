"""Configuration defaults and environment helpers for biz_errors."""

from . import defaults
from .env import (
    get_event_level,
    get_log_level,
    get_stack_depth,
    json_logging_enabled,
    parse_bool,
    parse_level,
    stack_capture_enabled,
)

__all__ = [
    "defaults",
    "get_event_level",
    "get_log_level",
    "get_stack_depth",
    "json_logging_enabled",
    "parse_bool",
    "parse_level",
    "stack_capture_enabled",
]
