"""MutableMap – a materialized Map that can be updated in place."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, TypeVar, final

from scalike.collections.map import ArrayMap, Map
from scalike.collections.option import Nothing, Option, Some
from scalike.errors import InvalidArgumentError, MissingKeyError
from scalike.support.iterables import MISSING, as_pair, is_iterable

K = TypeVar("K")
V = TypeVar("V")


@final
class MutableMap(ArrayMap[K, V]):
    """Map owning a private dict that ``update``/``remove``/item assignment change.

    The constructor always copies its source, and every combinator returns a
    new ``MutableMap``: no two instances share storage.
    """

    __slots__ = ()

    def __init__(self, source: Any = None) -> None:
        if source is None:
            values: dict[K, V] = {}
        elif isinstance(source, Map):
            values = dict(source._assoc())
        elif isinstance(source, Mapping):
            values = dict(source)
        elif is_iterable(source):
            values = dict(as_pair(item, "MutableMap") for item in source)
        else:
            raise InvalidArgumentError.unexpected(
                "MutableMap()", "a mapping or an iterable of pairs", source
            )
        super().__init__(values)

    def _derive(self, elements: Iterable[tuple[Any, Any]]) -> "MutableMap[Any, Any]":
        return MutableMap(elements)

    def _empty(self) -> "MutableMap[Any, Any]":
        return MutableMap()

    # ------------------------------------------------------------------
    # In-place updates
    # ------------------------------------------------------------------

    def update(self, key: K, value: V) -> None:
        self._values[key] = value

    def remove(self, key: K) -> Option[V]:
        """Delete *key*; ``Some(previous value)`` or ``Nothing`` when absent."""
        previous = self._values.pop(key, MISSING)
        return Nothing() if previous is MISSING else Some(previous)

    def get_or_else_update(self, key: K, supplier: Callable[[], V]) -> V:
        """Value for *key*, storing ``supplier()`` first when it is absent."""
        if key not in self._values:
            self._values[key] = supplier()
        return self._values[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._values[key] = value

    def __delitem__(self, key: K) -> None:
        if key not in self._values:
            raise MissingKeyError(key)
        del self._values[key]

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------

    def copy(self) -> "MutableMap[K, V]":
        return MutableMap(self._values)

    def take(self, n: int) -> "MutableMap[K, V]":
        return super().take(n) if n >= 0 else self.copy()

    def drop(self, n: int) -> "MutableMap[K, V]":
        return super().drop(n) if n > 0 else self.copy()

    def to_immutable(self) -> "Map[K, V]":
        return Map.of(self)


__all__ = ["MutableMap"]
