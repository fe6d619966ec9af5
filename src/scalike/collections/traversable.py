"""Traversable – the read and combinator contract shared by Seq and Map.

Each concrete variant supplies the hooks below (plus ``_realized``):

* ``_raw()``: an iterable over its elements (``Seq``: values; ``Map``:
  ``(key, value)`` pairs).  Lazy variants hand out their caching adapter,
  so reading through ``_raw()`` never re-runs a one-shot producer.
* ``_derive(elements)``: a sibling of the same variant built from an
  iterable.  Eager variants materialize it immediately; lazy variants keep
  the (unstarted) generator as their new producer.
* ``_empty()``: the empty instance of the same family.

Callbacks receive ``self._args(element)``: the element itself for a ``Seq``
and ``(value, key)`` for a ``Map``.
"""

from __future__ import annotations

import abc
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from scalike.collections.option import Nothing, Option, Some
from scalike.collections.projection import resolve_projector
from scalike.errors import EmptyCollectionError, UnsupportedOperationError
from scalike.support.json import dumps

E = TypeVar("E")
U = TypeVar("U")


class Traversable(abc.ABC, Generic[E]):
    __slots__ = ()

    # ------------------------------------------------------------------
    # Variant hooks
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def _raw(self) -> Iterable[E]: ...

    @abc.abstractmethod
    def _derive(self, elements: Iterable[E]) -> Any: ...

    @abc.abstractmethod
    def _empty(self) -> Any: ...

    @abc.abstractmethod
    def _realized(self) -> list[E]:
        """All elements, realizing a lazy variant once. Callers must not mutate it."""

    @abc.abstractmethod
    def computed(self) -> Any: ...

    @abc.abstractmethod
    def json_serialize(self) -> Any: ...

    def _args(self, element: E) -> tuple[Any, ...]:
        return (element,)

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def filter(self, p: Callable[..., bool]) -> Any:
        def generate() -> Iterator[E]:
            for element in self._raw():
                if p(*self._args(element)):
                    yield element

        return self._derive(generate())

    def filter_not(self, p: Callable[..., bool]) -> Any:
        return self.filter(lambda *args: not p(*args))

    def take(self, n: int) -> Any:
        if n < 0:
            return self
        if n == 0:
            return self._empty()

        def generate() -> Iterator[E]:
            remaining = n
            for element in self._raw():
                yield element
                remaining -= 1
                if remaining <= 0:
                    return

        return self._derive(generate())

    def drop(self, n: int) -> Any:
        if n <= 0:
            return self

        def generate() -> Iterator[E]:
            skipped = 0
            for element in self._raw():
                if skipped < n:
                    skipped += 1
                    continue
                yield element

        return self._derive(generate())

    def take_right(self, n: int) -> Any:
        if n <= 0:
            return self._empty()
        return self._derive(self._realized()[-n:])

    def partition(self, p: Callable[..., bool]) -> tuple[Any, Any]:
        accepted: list[E] = []
        rejected: list[E] = []
        for element in self._raw():
            (accepted if p(*self._args(element)) else rejected).append(element)
        return self._derive(accepted).computed(), self._derive(rejected).computed()

    def group_by(self, key_or_fn: Any) -> Any:
        """Group elements by the projection of each element (a Map's values).

        Returns a ``Map`` from key to a collection of the same family, in
        first-seen key order with per-group insertion order.
        """
        from scalike.collections.map import Map

        project = resolve_projector(key_or_fn, "group_by")
        groups: dict[Any, list[E]] = {}
        for element in self._raw():
            groups.setdefault(project(self._args(element)[0]), []).append(element)
        return Map._from_dict(
            {key: self._derive(elements).computed() for key, elements in groups.items()}
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def each(self, f: Callable[..., Any]) -> None:
        for element in self._raw():
            f(*self._args(element))

    def exists(self, p: Callable[..., bool]) -> bool:
        return any(p(*self._args(element)) for element in self._raw())

    def for_all(self, p: Callable[..., bool]) -> bool:
        return all(p(*self._args(element)) for element in self._raw())

    def find(self, p: Callable[..., bool]) -> Option[E]:
        for element in self._raw():
            if p(*self._args(element)):
                return Some(element)
        return Nothing()

    def fold(self, z: U, op: Callable[..., U]) -> U:
        for element in self._raw():
            z = op(z, *self._args(element))
        return z

    def count(self, p: Callable[..., bool] | None = None) -> int:
        if p is None:
            return self.size()
        return sum(1 for element in self._raw() if p(*self._args(element)))

    def size(self) -> int:
        return len(self._realized())

    def is_empty(self) -> bool:
        for _ in self._raw():
            return False
        return True

    def non_empty(self) -> bool:
        return not self.is_empty()

    def head(self) -> E:
        for element in self._raw():
            return element
        raise EmptyCollectionError("head")

    def head_option(self) -> Option[E]:
        for element in self._raw():
            return Some(element)
        return Nothing()

    def last(self) -> E:
        elements = self._realized()
        if not elements:
            raise EmptyCollectionError("last")
        return elements[-1]

    def last_option(self) -> Option[E]:
        elements = self._realized()
        return Some(elements[-1]) if elements else Nothing()

    def max_by(self, f: Callable[..., Any]) -> E:
        return self._extreme_by(f, "max_by", lambda candidate, best: candidate > best)

    def min_by(self, f: Callable[..., Any]) -> E:
        return self._extreme_by(f, "min_by", lambda candidate, best: candidate < best)

    def _extreme_by(
        self,
        f: Callable[..., Any],
        operation: str,
        better: Callable[[Any, Any], bool],
    ) -> E:
        found = False
        best_key: Any = None
        best: Any = None
        for element in self._raw():
            key = f(*self._args(element))
            if not found or better(key, best_key):
                found, best_key, best = True, key, element
        if not found:
            raise EmptyCollectionError(operation)
        return best

    def sum_by(self, f: Callable[..., Any]) -> Any:
        return sum(f(*self._args(element)) for element in self._raw())

    def to_list(self) -> list[E]:
        return list(self._realized())

    def to_json(self, **kwargs: Any) -> str:
        return dumps(self, **kwargs)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[E]:
        return iter(self._raw())

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.non_empty()

    def __setitem__(self, key: Any, value: Any) -> None:
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support item assignment", operation="__setitem__"
        )

    def __delitem__(self, key: Any) -> None:
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support item deletion", operation="__delitem__"
        )


__all__ = ["Traversable"]
