"""
Protocol for errors that define their own single-level equality test.

``biz_errors.chain.is_error`` asks every chain member implementing this
Protocol whether it ``matches`` the target. Implementations must not recurse
into their cause; the chain walker is responsible for visiting every level.

External dependencies: None.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsMatch(Protocol):
    """Structural contract for type-directed error equality."""

    def matches(self, target: BaseException) -> bool:  # pragma: no cover - interface
        ...


__all__ = ["SupportsMatch"]
