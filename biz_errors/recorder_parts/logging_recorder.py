"""Default error recorder writing wrap events to the package logger."""
from __future__ import annotations

import logging
from typing import Optional

from ..config import defaults
from ..config.env import get_event_level
from ..logging import get_logger, log_event
from .error_event import ErrorEvent


class LoggingRecorder:
    """Write every wrap event as one structured log line.

    The line carries the event name ``biz_error.wrap``, the context fields,
    ``correlation_id``, ``location``, ``values``, ``cause`` and ``cause_type``.
    The level comes from ``BIZ_ERRORS_EVENT_LEVEL`` unless ``level`` is given.
    Stdlib logging handlers serialise writes, so one instance can be shared by
    all threads.
    """

    def __init__(self, logger_name: str = defaults.RECORDER_LOGGER_NAME, level: Optional[int] = None) -> None:
        self.logger_name = logger_name
        self.level = level
        self._logger: Optional[logging.Logger] = None

    @property
    def logger(self) -> logging.Logger:
        if self._logger is None:
            self._logger = get_logger(self.logger_name)
        return self._logger

    def record(self, event: ErrorEvent) -> None:
        level = self.level if self.level is not None else get_event_level()
        log_event(self.logger, defaults.WRAP_EVENT_NAME, event.ctx, level=level, **event.to_log_fields())


__all__ = ["LoggingRecorder"]
