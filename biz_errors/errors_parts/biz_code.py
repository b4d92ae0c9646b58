"""
Business error codes.

A ``BizCode`` is an immutable classification label. It creates ``BizError``
chains with :meth:`BizCode.wrap` and recognises them again with
:meth:`BizCode.equal`, at any depth of the chain.

The first classified wrap of a chain fixes its correlation id and origin; outer
wraps copy both verbatim, so every node of one chain reports the same values.
Each wrap hands one ``ErrorEvent`` to the process-wide recorder.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from ..chain import as_error
from ..location import capture_origin
from ..log_support import LogContext
from ..recorder import ErrorEvent, get_recorder
from .biz_error import BizError

logger = logging.getLogger(__name__)


def new_correlation_id() -> str:
    """Return a fresh correlation id for a new chain."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class BizCode:
    """Represents a business error code used to create and identify errors.

    Attributes:
        key: Unique identifier for the error code.
        ctx: Optional request/trace context attached with :meth:`with_context`.
            It is forwarded to recorded events and never affects equality.
    """

    key: str = ""
    ctx: Optional[LogContext] = field(default=None, compare=False, repr=False)

    def with_context(self, ctx: Optional[LogContext]) -> "BizCode":
        """Return a copy of this code carrying ``ctx``.

        Raises:
            TypeError: If ``ctx`` is neither ``None`` nor a ``LogContext``.
        """
        if ctx is not None and not isinstance(ctx, LogContext):
            raise TypeError(f"BizCode context must be a LogContext, got {type(ctx).__name__}")
        return replace(self, ctx=ctx)

    def wrap(self, err: Optional[BaseException], *values: Any) -> Optional[BizError]:
        """Attach this code to ``err``.

        Parameters:
            err: The error to classify. ``None`` means there is nothing to
                classify; ``None`` is returned and nothing is recorded.
            *values: Auxiliary values recorded with the event.

        Returns:
            A new ``BizError`` wrapping ``err``, or ``None``.

        Raises:
            TypeError: If ``err`` is not an exception.
        """
        if err is None:
            return None
        if not isinstance(err, BaseException):
            raise TypeError(f"BizCode.wrap expects an exception, got {type(err).__name__}")

        inner = as_error(err, BizError)
        if inner is not None:
            correlation_id, origin = inner.correlation_id, inner.origin
        else:
            correlation_id, origin = new_correlation_id(), capture_origin(1)

        node = BizError(self.key, err, correlation_id=correlation_id, origin=origin)
        event = ErrorEvent(
            ctx=self.ctx,
            cause=err,
            location=origin.location,
            values=values,
            correlation_id=correlation_id,
        )
        try:
            get_recorder().record(event)
        except Exception:
            logger.exception("error recorder failed for %s (correlation_id=%s)", self.key, correlation_id)
        return node

    def equal(self, err: Optional[BaseException]) -> bool:
        """Return True if any ``BizError`` in the chain of ``err`` has this key.

        The nearest ``BizError`` is located first (unclassified wrappers are
        walked through); on a key mismatch the search resumes from that node's
        cause, so a closer node with a different key does not hide a match.
        """
        visited = set()
        current = err
        while current is not None:
            node = as_error(current, BizError)
            if node is None or id(node) in visited:
                return False
            if node.key == self.key:
                return True
            visited.add(id(node))
            current = node.cause
        return False

    def __str__(self) -> str:
        return self.key


__all__ = ["BizCode", "new_correlation_id"]
