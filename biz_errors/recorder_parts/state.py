"""Process-wide error recorder binding.

The binding is expected to be set once during application start-up, before
concurrent ``wrap`` calls begin. Reassignment at runtime is still safe: writes
are serialised by a lock and readers always see either the old or the new
recorder.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from ..interfaces import ErrorRecorder
from .logging_recorder import LoggingRecorder

_LOCK = threading.Lock()
_DEFAULT: ErrorRecorder = LoggingRecorder()
_RECORDER: ErrorRecorder = _DEFAULT


def get_recorder() -> ErrorRecorder:
    """Return the recorder currently receiving wrap events."""
    return _RECORDER


def set_recorder(recorder: Optional[ErrorRecorder]) -> ErrorRecorder:
    """Install ``recorder`` process-wide and return the previous one.

    ``None`` restores the default :class:`LoggingRecorder`.

    Raises:
        TypeError: If ``recorder`` has no ``record`` method.
    """
    global _RECORDER  # noqa: PLW0603 - documented process-wide binding
    if recorder is None:
        recorder = _DEFAULT
    elif not isinstance(recorder, ErrorRecorder):
        raise TypeError(f"error recorder must implement record(event), got {type(recorder).__name__}")
    with _LOCK:
        previous = _RECORDER
        _RECORDER = recorder
    return previous


def reset_recorder() -> None:
    """Restore the default logging recorder."""
    set_recorder(None)


@contextmanager
def use_recorder(recorder: ErrorRecorder) -> Iterator[ErrorRecorder]:
    """Temporarily install ``recorder``; the previous binding is restored on exit."""
    previous = set_recorder(recorder)
    try:
        yield recorder
    finally:
        set_recorder(previous)


__all__ = ["get_recorder", "set_recorder", "reset_recorder", "use_recorder"]
