"""Wrap event DTO handed to error recorders.

Purpose
-------
Carry everything a recorder needs to describe one ``BizCode.wrap`` call: the
context attached to the code, the wrapped cause, the origin location, the
auxiliary values passed to ``wrap`` and the chain's correlation id.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and immutability.

Failure modes & side effects
----------------------------
- Pure data container: no I/O. Events are built by the library; direct
  construction with wrong types raises ``pydantic.ValidationError``.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..log_support import LogContext


class ErrorEvent(BaseModel):
    """One wrap of an error with a business code.

    Attributes
    ----------
    ctx:
        Context attached to the wrapping code, if any.
    cause:
        The error that was wrapped.
    location:
        Origin location of the chain (first classified wrap).
    values:
        Auxiliary values passed to ``wrap``.
    correlation_id:
        Identifier shared by every node of the chain.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ctx: Optional[LogContext] = None
    cause: BaseException
    location: str = ""
    values: Tuple[Any, ...] = Field(default_factory=tuple)
    correlation_id: str

    def to_log_fields(self) -> Dict[str, Any]:
        """Return the JSON-friendly fields written by the logging recorder."""
        return {
            "correlation_id": self.correlation_id,
            "location": self.location,
            "values": list(self.values),
            "cause": str(self.cause),
            "cause_type": type(self.cause).__name__,
        }


__all__ = ["ErrorEvent"]
