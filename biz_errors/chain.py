"""Generic error-chain traversal.

Every lookup in the package reduces to :func:`find_node`: walk the chain that
starts at an error, one :func:`unwrap` step at a time, and return the first
member satisfying a predicate. The helpers work with any exception, not just
``BizError``:

- members implementing ``SupportsUnwrap`` are followed through ``unwrap()``;
- other exceptions are followed through their explicit ``__cause__``
  (``raise X from Y``). Implicit ``__context__`` is not treated as wrapping.

Traversal stops at the end of the chain or when a member repeats, so
hand-built cyclic chains terminate.
"""
from __future__ import annotations

from typing import Callable, Iterator, Optional, Type, TypeVar

from .interfaces import SupportsMatch, SupportsUnwrap

E = TypeVar("E", bound=BaseException)


def unwrap(err: BaseException) -> Optional[BaseException]:
    """Return the error directly wrapped by ``err``, or ``None``.

    An ``unwrap()`` result that is not an exception ends the chain.
    """
    if isinstance(err, SupportsUnwrap):
        inner = err.unwrap()
        return inner if isinstance(inner, BaseException) else None
    return getattr(err, "__cause__", None)


def iter_chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    """Yield ``err`` followed by every error reachable through :func:`unwrap`."""
    seen = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = unwrap(current)


def find_node(
    err: Optional[BaseException],
    predicate: Callable[[BaseException], bool],
) -> Optional[BaseException]:
    """Return the nearest chain member for which ``predicate`` is true."""
    for node in iter_chain(err):
        if predicate(node):
            return node
    return None


def as_error(err: Optional[BaseException], cls: Type[E]) -> Optional[E]:
    """Return the nearest chain member that is an instance of ``cls``."""
    node = find_node(err, lambda e: isinstance(e, cls))
    return node  # type: ignore[return-value]


def is_error(err: Optional[BaseException], target: BaseException) -> bool:
    """Report whether any chain member is, or matches, ``target``.

    A member matches when it is the very same object as ``target`` or when it
    implements ``SupportsMatch`` and its ``matches(target)`` returns true.
    """

    def _hit(node: BaseException) -> bool:
        if node is target:
            return True
        return isinstance(node, SupportsMatch) and node.matches(target)

    return find_node(err, _hit) is not None


__all__ = ["unwrap", "iter_chain", "find_node", "as_error", "is_error"]
