"""Pytest configuration for the biz_errors test suite.

Provides a collecting recorder so tests can inspect wrap events without going
through logging, and a fixture that routes the shared ``biz_errors`` logger to
an in-memory stream for the duration of a test.
"""

from __future__ import annotations

import io
import logging
import threading
from typing import Iterator, List

import pytest

from biz_errors.logging import get_logger
from biz_errors.recorder import ErrorEvent, reset_recorder, use_recorder


class CollectingRecorder:
    """Recorder keeping every event in memory (thread-safe)."""

    def __init__(self) -> None:
        self.events: List[ErrorEvent] = []
        self._lock = threading.Lock()

    def record(self, event: ErrorEvent) -> None:
        with self._lock:
            self.events.append(event)


@pytest.fixture(autouse=True)
def restore_default_recorder() -> Iterator[None]:
    """Guarantee each test ends with the default recorder installed."""
    yield
    reset_recorder()


@pytest.fixture()
def recorder() -> Iterator[CollectingRecorder]:
    """Install a ``CollectingRecorder`` process-wide for one test."""
    collecting = CollectingRecorder()
    with use_recorder(collecting):
        yield collecting


@pytest.fixture()
def captured_log() -> Iterator[io.StringIO]:
    """Route the base ``biz_errors`` logger into a ``StringIO`` (message only).

    The handler is not tagged as managed, so ``get_logger`` calls made during
    the test leave it in place. Handlers and level are restored afterwards.
    """
    base = get_logger()
    saved_handlers = list(base.handlers)
    saved_level = base.level
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    base.handlers[:] = [handler]
    base.setLevel(logging.DEBUG)
    try:
        yield stream
    finally:
        base.handlers[:] = saved_handlers
        base.setLevel(saved_level)
