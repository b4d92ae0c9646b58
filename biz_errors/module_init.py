"""Declarative initialisation of ``BizCode`` trees.

A code tree is a dataclass whose fields are ``BizCode`` values tagged with a
key, optionally grouped into nested dataclasses tagged with a prefix::

    @dataclass
    class Codes:
        common: BizCode = code_field("common")

        @dataclass
        class User:
            not_found: BizCode = code_field("notFound")

        user: User = group_field(User, prefix="user")

    codes = Codes()
    init_module("app", codes)
    codes.common.key         # "appcommon"
    codes.user.not_found.key  # "appusernotFound"

Tags live in the dataclass field ``metadata`` under ``"key"`` and ``"prefix"``;
``code_field`` and ``group_field`` are shorthands for declaring them.

``init_module`` never raises on malformed input. Anything that is not a
dataclass instance is ignored and untagged fields are skipped. Frozen
dataclasses are left as they are (see :func:`init_module`).
"""
from __future__ import annotations

from dataclasses import Field, field, fields, is_dataclass, replace
from typing import Any, Callable, Iterator, NamedTuple, Optional, Set

from .config.defaults import KEY_TAG, PREFIX_TAG
from .errors import BizCode


def code_field(key: str) -> Any:
    """Declare a ``BizCode`` field whose key is ``<prefix><key>`` after init."""
    return field(default_factory=BizCode, metadata={KEY_TAG: key})


def group_field(factory: Callable[[], Any], prefix: str = "") -> Any:
    """Declare a nested group of codes, optionally extending the prefix."""
    metadata = {PREFIX_TAG: prefix} if prefix else {}
    return field(default_factory=factory, metadata=metadata)


class _FieldSpec(NamedTuple):
    name: str
    value: Any
    tag_key: str
    tag_prefix: str


def _describe(obj: Any) -> Iterator[_FieldSpec]:
    # declaration order
    f: Field
    for f in fields(obj):
        yield _FieldSpec(
            name=f.name,
            value=getattr(obj, f.name, None),
            tag_key=str(f.metadata.get(KEY_TAG) or ""),
            tag_prefix=str(f.metadata.get(PREFIX_TAG) or ""),
        )


def _is_tree(value: Any) -> bool:
    return is_dataclass(value) and not isinstance(value, (type, BizCode))


def _is_frozen(obj: Any) -> bool:
    params = getattr(type(obj), "__dataclass_params__", None)
    return bool(getattr(params, "frozen", False))


def _init(prefix: str, obj: Any, visited: Set[int]) -> None:
    visited.add(id(obj))
    settable = not _is_frozen(obj)
    for spec in _describe(obj):
        if isinstance(spec.value, BizCode):
            if spec.tag_key and settable:
                setattr(obj, spec.name, replace(spec.value, key=f"{prefix}{spec.tag_key}"))
        elif _is_tree(spec.value) and id(spec.value) not in visited:
            _init(f"{prefix}{spec.tag_prefix}", spec.value, visited)


def init_module(prefix: str, obj: Optional[Any]) -> None:
    """Assign keys to every tagged ``BizCode`` field reachable from ``obj``.

    Parameters:
        prefix: String prepended to every key in the tree.
        obj: A dataclass instance holding ``BizCode`` fields and nested groups.
            ``None``, classes and non-dataclass values are ignored.

    Code fields of a frozen dataclass are not assigned: a tree declared with
    ``@dataclass(frozen=True)`` keeps empty keys. Use a mutable dataclass for
    code trees; frozen groups may still contain mutable groups, which are
    initialised normally.
    """
    if not _is_tree(obj):
        return
    _init(prefix or "", obj, set())


__all__ = ["code_field", "group_field", "init_module"]
