"""Map – insertion-ordered association with eager (ArrayMap) and lazy (LazyMap) backings.

Iterating a Map yields ``(key, value)`` tuples; callbacks of the shared
combinators receive ``(value, key)``.  Re-inserting an existing key replaces
its value and keeps its original position, exactly like ``dict``.

Usage::

    cars = Map.of({"Civic": "Honda"}).append("Levorg", "Subaru")
    cars.get("Civic")                     # Some('Honda')
    cars.map_values(str.upper).to_dict()  # {'Civic': 'HONDA', 'Levorg': 'SUBARU'}
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any, Callable, ClassVar, Generic, Iterable, Iterator, TypeVar, final

from scalike.collections.caching import CachingIterator, deferred
from scalike.collections.option import Nothing, Option, Some
from scalike.collections.seq import LazySeq, Seq
from scalike.collections.traversable import Traversable
from scalike.errors import (
    InvalidArgumentError,
    InvalidMappingError,
    MissingKeyError,
    UnsupportedOperationError,
)
from scalike.observability.logging import get_logger, tracing_enabled
from scalike.support.iterables import MISSING, as_pair, is_iterable, is_iterator
from scalike.support.json import to_jsonable

K = TypeVar("K")
V = TypeVar("V")
U = TypeVar("U")

logger = get_logger(__name__)


def _pairs_of(source: Any, operation: str) -> Iterable[tuple[Any, Any]]:
    """Key/value pairs of a Map, a mapping or an iterable of 2-item tuples/lists."""
    if isinstance(source, Map):
        return source
    if isinstance(source, Mapping):
        return source.items()
    if is_iterable(source):
        return (as_pair(item, operation) for item in source)
    raise InvalidArgumentError.unexpected(operation, "a mapping or an iterable of pairs", source)


class Map(Traversable[tuple[K, V]], Generic[K, V]):
    """Key-unique, insertion-ordered association."""

    __slots__ = ()

    _empty_instance: ClassVar["ArrayMap[Any, Any] | None"] = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def of(source: Any = None) -> "Map[Any, Any]":
        """Build a Map from a mapping (copied) or an iterable of pairs (lazy).

        Immutable Maps are returned as-is; a ``MutableMap`` is snapshotted.
        """
        from scalike.collections.mutable_map import MutableMap

        if source is None:
            return Map.empty()
        if isinstance(source, MutableMap):
            return Map._from_dict(dict(source._assoc()))
        if isinstance(source, Map):
            return source
        if isinstance(source, Mapping):
            return Map._from_dict(dict(source))
        if is_iterable(source):
            return LazyMap(source)
        raise InvalidArgumentError.unexpected(
            "Map.of()", "a mapping or an iterable of pairs", source
        )

    @staticmethod
    def create(factory: Callable[[], Any]) -> "LazyMap[Any, Any]":
        """Lazy Map over what *factory* returns: a mapping or an iterable of pairs.

        *factory* is called on the first read, at most once.
        """
        if not callable(factory):
            raise InvalidArgumentError.unexpected("Map.create()", "a callable", factory)
        return LazyMap(deferred(lambda: _pairs_of(factory(), "Map.create")))

    @staticmethod
    def empty() -> "ArrayMap[Any, Any]":
        if Map._empty_instance is None:
            Map._empty_instance = ArrayMap({})
        return Map._empty_instance

    @staticmethod
    def mutable(source: Any = None) -> Any:
        from scalike.collections.mutable_map import MutableMap

        return MutableMap(source)

    @staticmethod
    def _from_dict(values: dict[Any, Any]) -> "ArrayMap[Any, Any]":
        # Takes ownership of *values*.
        return ArrayMap(values) if values else Map.empty()

    # ------------------------------------------------------------------
    # Variant hooks
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def _assoc(self) -> dict[K, V]:
        """The backing dict, realizing a lazy map once. Callers must not mutate it."""

    def _raw(self) -> Iterable[tuple[K, V]]:
        return self._assoc().items()

    def _realized(self) -> list[tuple[K, V]]:
        return list(self._assoc().items())

    def _empty(self) -> "Map[Any, Any]":
        return Map.empty()

    def _args(self, element: tuple[K, V]) -> tuple[Any, ...]:
        return element[1], element[0]

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def map(self, f: Callable[[V, K], tuple[Any, Any]]) -> "Map[Any, Any]":
        def generate() -> Iterator[tuple[Any, Any]]:
            for key, value in self._raw():
                yield as_pair(f(value, key), "map")

        return self._derive(generate())

    def map_values(self, f: Callable[[V], U]) -> "Map[K, U]":
        def generate() -> Iterator[tuple[K, U]]:
            for key, value in self._raw():
                yield key, f(value)

        return self._derive(generate())

    def flat_map(self, f: Callable[[V, K], Any]) -> "Map[Any, Any]":
        def generate() -> Iterator[tuple[Any, Any]]:
            for key, value in self._raw():
                result = f(value, key)
                if isinstance(result, Mapping):
                    yield from result.items()
                elif is_iterable(result):
                    for item in result:
                        yield as_pair(item, "flat_map")
                else:
                    raise InvalidMappingError.unexpected(
                        "flat_map", "a function returning a mapping or pairs", result
                    )

        return self._derive(generate())

    def flatten(self) -> Any:
        raise UnsupportedOperationError("Map does not support flatten()", operation="flatten")

    def append(self, key_or_pairs: Any, value: Any = MISSING) -> "Map[Any, Any]":
        """Add one pair, or overlay a mapping / iterable of pairs.

        Existing keys get the new value and keep their position.
        """
        extra = [(key_or_pairs, value)] if value is not MISSING else _pairs_of(key_or_pairs, "append")

        def generate() -> Iterator[tuple[Any, Any]]:
            yield from self._raw()
            yield from extra

        return self._derive(generate())

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get(self, key: K) -> Option[V]:
        assoc = self._assoc()
        return Some(assoc[key]) if key in assoc else Nothing()

    def get_or_else(self, key: K, default: U) -> V | U:
        return self.get(key).get_or_else(default)

    def get_or_call(self, key: K, f: Callable[[], U]) -> V | U:
        return self.get(key).get_or_call(f)

    def contains(self, key: K) -> bool:
        return key in self._assoc()

    def keys(self) -> Seq[K]:
        return Seq._from_list(list(self._assoc().keys()))

    def values(self) -> Seq[V]:
        return Seq._from_list(list(self._assoc().values()))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        return len(self._assoc())

    def is_empty(self) -> bool:
        return not self._assoc()

    def max(self) -> tuple[K, V]:
        return self._extreme_by(lambda value, key: value, "max", lambda candidate, best: candidate > best)

    def min(self) -> tuple[K, V]:
        return self._extreme_by(lambda value, key: value, "min", lambda candidate, best: candidate < best)

    def sum(self) -> Any:
        raise UnsupportedOperationError("Map does not support sum(); use sum_by()", operation="sum")

    def to_seq(self) -> Seq[tuple[K, V]]:
        return Seq._from_list(self._realized())

    def to_list(self) -> list[tuple[K, V]]:
        return self._realized()

    def to_dict(self) -> dict[K, V]:
        return dict(self._assoc())

    def mk_string(self, sep: str = "") -> str:
        return sep.join(f"{key} => {value}" for key, value in self._raw())

    def json_serialize(self) -> dict[Any, Any]:
        return {key: to_jsonable(value) for key, value in self._raw()}

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        assoc = self._assoc()
        if key in assoc:
            return assoc[key]
        raise MissingKeyError(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return self._assoc() == other._assoc()

    __hash__ = None  # type: ignore[assignment]


class ArrayMap(Map[K, V]):
    """Map backed by a private dict; transformations run immediately."""

    __slots__ = ("_values",)

    def __init__(self, values: dict[K, V]) -> None:
        self._values = values

    def _assoc(self) -> dict[K, V]:
        return self._values

    def _derive(self, elements: Iterable[tuple[Any, Any]]) -> "Map[Any, Any]":
        return Map._from_dict(dict(elements))

    def computed(self) -> "ArrayMap[K, V]":
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"


@final
class LazyMap(Map[K, V]):
    """Map over a deferred producer of pairs.

    Nothing is pulled until the first read.  Because duplicate keys must
    collapse, that read realizes the whole association once; later reads are
    served from it.
    """

    __slots__ = ("_source", "_values")

    def __init__(self, source: Iterable[Any]) -> None:
        self._source: Iterable[Any] = CachingIterator(source) if is_iterator(source) else source
        self._values: dict[K, V] | None = None

    def _assoc(self) -> dict[K, V]:
        if self._values is None:
            self._values = dict(as_pair(item, "Map") for item in self._source)
            self._source = ()
            if tracing_enabled():
                logger.debug("lazy_map.realized", size=len(self._values))
        return self._values

    def _derive(self, elements: Iterable[tuple[Any, Any]]) -> "LazyMap[Any, Any]":
        return LazyMap(elements)

    @property
    def realized(self) -> bool:
        return self._values is not None

    def to_seq(self) -> Seq[tuple[K, V]]:
        def generate() -> Iterator[tuple[K, V]]:
            yield from self._raw()

        return LazySeq(generate())

    def computed(self) -> "ArrayMap[K, V]":
        return Map._from_dict(dict(self._assoc()))

    def __repr__(self) -> str:
        if self._values is None:
            return "LazyMap(<unevaluated>)"
        return f"LazyMap({self._values!r})"


__all__ = ["ArrayMap", "LazyMap", "Map"]
