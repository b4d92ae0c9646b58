"""Call-site capture for error origins.

``capture_location`` turns a stack frame into a compact
``"<file>/<module>.<function>:<line>"`` string. ``capture_origin`` adds a
bounded stack summary used by the verbose ``BizError`` format. Both are called
once per chain, at the first classified wrap.

Neither function raises: when frame introspection is unavailable (e.g. on
interpreters without ``inspect.currentframe`` support) the location is the
empty string and no frames are kept.
"""
from __future__ import annotations

import inspect
import os
import traceback
from dataclasses import dataclass
from types import FrameType
from typing import Optional, Tuple

from .config.env import get_stack_depth, stack_capture_enabled


@dataclass(frozen=True)
class Origin:
    """Where a chain of classified errors started.

    Attributes:
        location: ``"<file>/<module>.<function>:<line>"`` of the first wrap
            call site, or ``""`` when it could not be determined.
        frames: Stack summary (oldest first) ending at that call site. Empty
            when stack capture is disabled.
    """

    location: str = ""
    frames: Tuple[traceback.FrameSummary, ...] = ()

    def format_stack(self) -> str:
        """Render ``frames`` the way tracebacks print them."""
        if not self.frames:
            return ""
        return "".join(traceback.format_list(list(self.frames)))


def _frame_at(depth: int) -> Optional[FrameType]:
    # depth 0 is the caller of _frame_at
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


def _describe(frame: FrameType) -> str:
    code = frame.f_code
    file_name = os.path.basename(code.co_filename)
    func = getattr(code, "co_qualname", code.co_name)
    module = str(frame.f_globals.get("__name__") or "").rsplit(".", 1)[-1]
    if module:
        func = f"{module}.{func}"
    return f"{file_name}/{func}:{frame.f_lineno}"


def capture_location(skip: int = 0) -> str:
    """Return the location of the caller ``skip`` frames above the current one.

    ``skip=0`` describes the function that called ``capture_location``;
    ``skip=1`` its caller, and so on. Returns ``""`` when the frame does not
    exist.
    """
    frame = _frame_at(max(skip, 0) + 1)
    if frame is None:
        return ""
    try:
        return _describe(frame)
    except Exception:  # pragma: no cover - exotic frame objects
        return ""
    finally:
        del frame


def capture_origin(skip: int = 0) -> Origin:
    """Capture an :class:`Origin` for the caller ``skip`` frames up.

    Frame selection matches :func:`capture_location`. The stack summary is
    bounded by ``BIZ_ERRORS_STACK_DEPTH`` and skipped entirely when
    ``BIZ_ERRORS_CAPTURE_STACK`` is false.
    """
    frame = _frame_at(max(skip, 0) + 1)
    if frame is None:
        return Origin()
    try:
        frames: Tuple[traceback.FrameSummary, ...] = ()
        if stack_capture_enabled():
            frames = tuple(traceback.extract_stack(frame, limit=get_stack_depth()))
        return Origin(location=_describe(frame), frames=frames)
    except Exception:  # pragma: no cover - exotic frame objects
        return Origin()
    finally:
        del frame


__all__ = ["Origin", "capture_location", "capture_origin"]
