"""
Protocol for errors that wrap exactly one other error.

``biz_errors.chain`` walks an error chain by calling ``unwrap()`` on every
member that implements this Protocol and falls back to the explicit
``__cause__`` otherwise. Third-party exception types can opt in without
subclassing anything from this package.

External dependencies: None.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class SupportsUnwrap(Protocol):
    """Structural contract for errors exposing the error they wrap."""

    def unwrap(self) -> Optional[BaseException]:  # pragma: no cover - interface
        """Return the directly wrapped error, or ``None`` at the end of a chain."""
        ...


__all__ = ["SupportsUnwrap"]
