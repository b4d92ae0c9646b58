"""Structured logging context object for error events.

This module defines :class:`LogContext`, a dataclass carrying the request or
trace information an application attaches to a ``BizCode`` via
``BizCode.with_context``. The default recorder merges it into every wrap event.
``to_dict`` merges the ``extra`` mapping and prunes ``None`` values for clean
structured output.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Request/trace context attached to error codes and their events."""

    request_id: Optional[str] = None
    trace_id: Optional[str] = None
    user_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
