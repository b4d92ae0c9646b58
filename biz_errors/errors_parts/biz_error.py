"""
Chained business error produced by ``BizCode.wrap``.

A ``BizError`` stamps a wrapped exception with the key of the code that
created it. Its string form is the key alone: classification identity, not the
wrapped diagnostic text, is what callers print and compare. The wrapped error
stays reachable through ``unwrap()`` and ``__cause__``, so tracebacks render the
full chain and generic chain helpers (``biz_errors.chain``) walk through it.

Nodes are read-only after construction and safe to share across threads.
"""
from __future__ import annotations

import json
from typing import Optional

from ..location import Origin


class BizError(Exception):
    """Represents a business error with a code key, a cause and its origin.

    Attributes:
        key: Key of the ``BizCode`` that produced this error.
        cause: The wrapped error, or ``None`` for a bare match target.
        correlation_id: Identifier shared by every node of one chain.
        origin: Call site of the first classified wrap in the chain.
    """

    def __init__(
        self,
        key: str,
        cause: Optional[BaseException] = None,
        *,
        correlation_id: str = "",
        origin: Optional[Origin] = None,
    ) -> None:
        super().__init__(key)
        self._key = key
        self._cause = cause
        self._correlation_id = correlation_id
        self._origin = origin if origin is not None else Origin()
        self.__cause__ = cause

    @property
    def key(self) -> str:
        return self._key

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def correlation_id(self) -> str:
        return self._correlation_id

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def location(self) -> str:
        """Shortcut for ``origin.location``."""
        return self._origin.location

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"BizError(key={self._key!r}, correlation_id={self._correlation_id!r}, cause={self._cause!r})"

    def __format__(self, format_spec: str) -> str:
        """Format the error.

        ``""``, ``"s"`` and ``"v"`` give the key; ``"+v"`` the key followed by
        the stack captured at the first wrap; ``"q"`` the key as a double-quoted
        string. Other specs apply to the key as ordinary string formatting.
        """
        if format_spec in ("", "s", "v"):
            return self._key
        if format_spec == "+v":
            return self.verbose()
        if format_spec == "q":
            return json.dumps(self._key, ensure_ascii=False)
        return format(self._key, format_spec)

    def verbose(self) -> str:
        """Return the key followed by the origin stack, one frame per entry."""
        stack = self._origin.format_stack()
        if not stack:
            return self._key
        return f"{self._key}\n{stack.rstrip()}"

    def matches(self, target: BaseException) -> bool:
        """Return True if ``target`` is a ``BizError`` with the same key.

        This is a single-level check. Searching a whole chain is done by
        ``biz_errors.chain.is_error`` or ``BizCode.equal``.
        """
        return isinstance(target, BizError) and target.key == self._key

    def unwrap(self) -> Optional[BaseException]:
        """Return the wrapped error."""
        return self._cause


__all__ = ["BizError"]
