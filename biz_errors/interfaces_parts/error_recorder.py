"""ErrorRecorder Protocol (single-class module).

Plug-in point consuming one ``ErrorEvent`` per ``BizCode.wrap`` call. The
package ships ``LoggingRecorder`` as the process-wide default; applications
install an alternative with ``biz_errors.recorder.set_recorder``.

Recorders are invoked synchronously on the wrapping thread and may be called
concurrently from many threads; implementations must be thread-safe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..recorder_parts.error_event import ErrorEvent


@runtime_checkable
class ErrorRecorder(Protocol):
    """Consumer of wrap events."""

    def record(self, event: "ErrorEvent") -> None:  # pragma: no cover - interface
        """Record a single wrap event.

        Parameters
        ----------
        event:
            The event describing the wrap. It is not retained by the library
            after this call returns.
        """
        ...


__all__ = ["ErrorRecorder"]
