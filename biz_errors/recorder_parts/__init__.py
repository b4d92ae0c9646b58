"""Recorder parts package public surface.

Prefer importing from ``biz_errors.recorder`` for the stable surface.
"""

from .error_event import ErrorEvent
from .logging_recorder import LoggingRecorder
from .state import get_recorder, reset_recorder, set_recorder, use_recorder

__all__ = [
    "ErrorEvent",
    "LoggingRecorder",
    "get_recorder",
    "set_recorder",
    "reset_recorder",
    "use_recorder",
]
