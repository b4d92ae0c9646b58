"""Error event recording public surface.

Every ``BizCode.wrap`` call builds one :class:`ErrorEvent` and hands it to the
process-wide recorder. The default :class:`LoggingRecorder` writes a structured
log line; applications may install any object implementing
:class:`~biz_errors.interfaces.ErrorRecorder` via :func:`set_recorder`.
"""

from .interfaces import ErrorRecorder
from .recorder_parts import (
    ErrorEvent,
    LoggingRecorder,
    get_recorder,
    reset_recorder,
    set_recorder,
    use_recorder,
)

__all__ = [
    "ErrorEvent",
    "ErrorRecorder",
    "LoggingRecorder",
    "get_recorder",
    "set_recorder",
    "reset_recorder",
    "use_recorder",
]
