"""Seq – ordered collection with an eager (ArraySeq) and a lazy (LazySeq) backing.

Both variants expose the same operations and give the same results; they
differ only in *when* work happens.  ``ArraySeq`` computes every
transformation immediately into a new list.  ``LazySeq`` describes the
pipeline as a chain of generators and runs it at most once, on the first
read that needs it; one-shot sources are wrapped in a
:class:`~scalike.collections.caching.CachingIterator` so repeated reads
never re-run them.

Usage::

    Seq.of(1, 2, 3).map(lambda x: x * 2).to_list()          # [2, 4, 6]
    Seq.from_iterable(read_rows()).filter(is_valid).take(10)  # nothing pulled yet
"""

from __future__ import annotations

import abc
import itertools
from typing import Any, Callable, ClassVar, Iterable, Iterator, TypeVar, final

from scalike.collections.caching import CachingIterator, deferred
from scalike.collections.projection import resolve_projector
from scalike.collections.traversable import Traversable
from scalike.errors import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidMappingError,
)
from scalike.observability.logging import get_logger, tracing_enabled
from scalike.support.iterables import (
    MISSING,
    is_iterable,
    is_iterator,
    strict_equals,
    strict_key,
)
from scalike.support.json import to_jsonable

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger(__name__)


def _identity(value: Any) -> Any:
    return value


class Seq(Traversable[T]):
    """Ordered sequence; indices are always dense ``0..size-1``."""

    __slots__ = ()

    _empty_instance: ClassVar["ArraySeq[Any] | None"] = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def of(*items: T) -> "Seq[T]":
        return Seq._from_list(list(items))

    @staticmethod
    def from_iterable(source: Any) -> "Seq[Any]":
        """Wrap *source* without copying more than needed.

        ``list``/``tuple`` are copied into an eager Seq; any other iterable
        (generators, ranges, sets, views) becomes a lazy Seq.
        """
        from scalike.collections.map import Map

        if source is None:
            return Seq.empty()
        if isinstance(source, Seq):
            return source
        if isinstance(source, Map):
            return source.to_seq()
        if isinstance(source, (list, tuple)):
            return Seq._from_list(list(source))
        if is_iterable(source):
            return LazySeq(source)
        raise InvalidArgumentError.unexpected("Seq.from_iterable()", "an iterable", source)

    @staticmethod
    def create(factory: Callable[[], Iterable[T]]) -> "LazySeq[T]":
        """Lazy Seq over the items *factory* returns, typically a generator function.

        *factory* is called on the first read, at most once.
        """
        if not callable(factory):
            raise InvalidArgumentError.unexpected("Seq.create()", "a callable", factory)

        def produce() -> Iterable[T]:
            items = factory()
            if not is_iterable(items):
                raise InvalidArgumentError.unexpected(
                    "Seq.create()", "a factory returning an iterable", items
                )
            return items

        return LazySeq(deferred(produce))

    @staticmethod
    def merge(a: Iterable[T], b: Iterable[T]) -> "LazySeq[T]":
        """Lazy concatenation of two iterables; neither is read until needed."""
        for operand in (a, b):
            if not is_iterable(operand):
                raise InvalidArgumentError.unexpected("Seq.merge()", "iterables", operand)
        return LazySeq(itertools.chain(a, b))

    @staticmethod
    def empty() -> "ArraySeq[Any]":
        if Seq._empty_instance is None:
            Seq._empty_instance = ArraySeq([])
        return Seq._empty_instance

    @staticmethod
    def _from_list(values: list[Any]) -> "ArraySeq[Any]":
        # Takes ownership of *values*.
        return ArraySeq(values) if values else Seq.empty()

    # ------------------------------------------------------------------
    # Variant hooks
    # ------------------------------------------------------------------

    def _empty(self) -> "ArraySeq[Any]":
        return Seq.empty()

    @abc.abstractmethod
    def _map_of(self, pairs: Iterable[tuple[Any, Any]]) -> Any: ...

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def map(self, f: Callable[[T], U]) -> "Seq[U]":
        def generate() -> Iterator[U]:
            for value in self._raw():
                yield f(value)

        return self._derive(generate())

    def flat_map(self, f: Callable[[T], Iterable[U]]) -> "Seq[U]":
        def generate() -> Iterator[U]:
            for value in self._raw():
                result = f(value)
                if not is_iterable(result):
                    raise InvalidMappingError.unexpected(
                        "flat_map", "a function returning an iterable", result
                    )
                yield from result

        return self._derive(generate())

    def flatten(self) -> "Seq[Any]":
        def generate() -> Iterator[Any]:
            for value in self._raw():
                if not is_iterable(value):
                    raise InvalidMappingError.unexpected("flatten", "iterable elements", value)
                yield from value

        return self._derive(generate())

    def distinct(self) -> "Seq[T]":
        return self.distinct_by(_identity)

    def distinct_by(self, f: Callable[[T], Any]) -> "Seq[T]":
        """Keep the first element of every group of strictly equal keys.

        Keys are equal only when they share a type and compare ``==``.
        """

        def generate() -> Iterator[T]:
            seen: set[Any] = set()
            seen_unhashable: list[Any] = []
            for value in self._raw():
                key = f(value)
                try:
                    marker = strict_key(key)
                    if marker in seen:
                        continue
                    seen.add(marker)
                except TypeError:
                    if any(strict_equals(key, other) for other in seen_unhashable):
                        continue
                    seen_unhashable.append(key)
                yield value

        return self._derive(generate())

    def append(self, other: Iterable[T]) -> "Seq[T]":
        extra = self._require_iterable(other, "append")

        def generate() -> Iterator[T]:
            yield from self._raw()
            yield from extra

        return self._derive(generate())

    def prepend(self, other: Iterable[T]) -> "Seq[T]":
        extra = self._require_iterable(other, "prepend")

        def generate() -> Iterator[T]:
            yield from extra
            yield from self._raw()

        return self._derive(generate())

    def append_element(self, value: T) -> "Seq[T]":
        return self.append((value,))

    def prepend_element(self, value: T) -> "Seq[T]":
        return self.prepend((value,))

    @staticmethod
    def _require_iterable(other: Any, operation: str) -> Iterable[Any]:
        if not is_iterable(other):
            raise InvalidArgumentError(
                f"{operation}() needs an iterable, {type(other).__name__} given;"
                f" use {operation}_element() for a single value",
                operation=operation,
                detail={"type": type(other).__name__},
            )
        return other

    def reverse(self) -> "Seq[T]":
        return Seq._from_list(self._realized()[::-1])

    def sort_by(self, key_or_fn: Any) -> "Seq[T]":
        project = resolve_projector(key_or_fn, "sort_by")
        return Seq._from_list(sorted(self._realized(), key=project))

    def drop_right(self, n: int) -> "Seq[T]":
        if n <= 0:
            return self
        return self._derive(self._realized()[:-n])

    def to_map(self, key_or_fn: Any) -> Any:
        """``Map`` from the projected key to the element; the last element wins."""
        project = resolve_projector(key_or_fn, "to_map")

        def generate() -> Iterator[tuple[Any, T]]:
            for value in self._raw():
                yield project(value), value

        return self._map_of(generate())

    def to_seq(self) -> "Seq[T]":
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def reduce(self, op: Callable[[T, T], T]) -> T:
        values = iter(self._raw())
        acc = next(values, MISSING)
        if acc is MISSING:
            raise EmptyCollectionError("reduce")
        for value in values:
            acc = op(acc, value)
        return acc

    def max(self) -> T:
        return self._extreme_by(_identity, "max", lambda candidate, best: candidate > best)

    def min(self) -> T:
        return self._extreme_by(_identity, "min", lambda candidate, best: candidate < best)

    def sum(self) -> Any:
        return sum(self._raw())

    def index_of(self, element: Any) -> int:
        for index, value in enumerate(self._raw()):
            if strict_equals(value, element):
                return index
        return -1

    def contains(self, element: Any) -> bool:
        return self.index_of(element) >= 0

    def mk_string(self, sep: str = "") -> str:
        return sep.join(str(value) for value in self._raw())

    def json_serialize(self) -> list[Any]:
        return [to_jsonable(value) for value in self._raw()]

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __getitem__(self, index: int) -> T:
        values = self._realized()
        if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(values):
            return values[index]
        raise IndexOutOfRangeError(index, len(values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        return self._realized() == other._realized()

    __hash__ = None  # type: ignore[assignment]


@final
class ArraySeq(Seq[T]):
    """Seq backed by a private list; transformations run immediately."""

    __slots__ = ("_values",)

    def __init__(self, values: list[T]) -> None:
        self._values = values

    def _raw(self) -> list[T]:
        return self._values

    def _realized(self) -> list[T]:
        return self._values

    def _derive(self, elements: Iterable[Any]) -> "Seq[Any]":
        return Seq._from_list(list(elements))

    def _map_of(self, pairs: Iterable[tuple[Any, Any]]) -> Any:
        from scalike.collections.map import Map

        return Map._from_dict(dict(pairs))

    def size(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        return not self._values

    def computed(self) -> "ArraySeq[T]":
        return self

    def __repr__(self) -> str:
        return f"ArraySeq({self._values!r})"


@final
class LazySeq(Seq[T]):
    """Seq whose elements are produced on demand and cached once realized.

    Until realized, reads go through the source (through the caching adapter
    for one-shot iterators), so short-circuiting reads pull only what they
    need.  The first full read stores the elements and drops the source.
    """

    __slots__ = ("_source", "_values")

    def __init__(self, source: Iterable[T]) -> None:
        self._source: Iterable[T] = CachingIterator(source) if is_iterator(source) else source
        self._values: list[T] | None = None

    def _raw(self) -> Iterable[T]:
        return self._source if self._values is None else self._values

    def _realized(self) -> list[T]:
        if self._values is None:
            self._values = list(self._source)
            self._source = ()
            if tracing_enabled():
                logger.debug("lazy_seq.realized", size=len(self._values))
        return self._values

    def _derive(self, elements: Iterable[Any]) -> "LazySeq[Any]":
        return LazySeq(elements)

    def _map_of(self, pairs: Iterable[tuple[Any, Any]]) -> Any:
        from scalike.collections.map import LazyMap

        return LazyMap(pairs)

    @property
    def realized(self) -> bool:
        return self._values is not None

    def computed(self) -> "ArraySeq[T]":
        return Seq._from_list(list(self._realized()))

    def __repr__(self) -> str:
        if self._values is None:
            return "LazySeq(<unevaluated>)"
        return f"LazySeq({self._values!r})"


__all__ = ["ArraySeq", "LazySeq", "Seq"]
