"""Small predicates and accessors shared by the collection implementations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from scalike.errors import InvalidMappingError

# Sentinel for missing values
MISSING: Any = object()

_SCALAR_ITERABLES = (str, bytes, bytearray)


def is_iterable(value: Any) -> bool:
    """True for iterables that are collections of elements.

    Strings and byte strings are treated as scalars.
    """
    return isinstance(value, Iterable) and not isinstance(value, _SCALAR_ITERABLES)


def is_iterator(value: Any) -> bool:
    """True when *value* is a single-pass iterator."""
    return isinstance(value, Iterator)


def strict_equals(a: Any, b: Any) -> bool:
    """``==`` restricted to values of the same type, so ``1``, ``True`` and ``1.0`` differ."""
    return type(a) is type(b) and a == b


def strict_key(value: Any) -> tuple[type, Any]:
    """Hashable stand-in for *value* that agrees with :func:`strict_equals`."""
    return type(value), value


def as_pair(item: Any, context: str) -> tuple[Any, Any]:
    """Return *item* as a ``(key, value)`` tuple or raise InvalidMappingError."""
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return item[0], item[1]
    raise InvalidMappingError(
        f"{context} should produce (key, value) pairs, got {item!r}",
        operation=context,
        detail={"item": repr(item)},
    )


def lookup(container: Any, name: Any) -> Any:
    """Fetch field/index *name* from *container*, or return :data:`MISSING`.

    Mappings are searched by key, sequences by non-negative integer index,
    and any other object by attribute name.
    """
    if isinstance(container, Mapping):
        try:
            return container[name]
        except (KeyError, TypeError):
            return MISSING
    if isinstance(container, Sequence) and not isinstance(container, _SCALAR_ITERABLES):
        if isinstance(name, int) and not isinstance(name, bool):
            return container[name] if 0 <= name < len(container) else MISSING
    if isinstance(name, str) and not isinstance(container, _SCALAR_ITERABLES):
        return getattr(container, name, MISSING)
    return MISSING


__all__ = [
    "MISSING",
    "as_pair",
    "is_iterable",
    "is_iterator",
    "lookup",
    "strict_equals",
    "strict_key",
]
