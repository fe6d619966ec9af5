"""Option[T] – Some and Nothing variants.

``Some`` always holds exactly one value, ``None`` included: ``Some(None)`` is
not ``Nothing``.  ``Nothing`` is a process-wide singleton.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, NoReturn, TypeVar, final

from scalike.errors import EmptyCollectionError, EmptyValueError, TypeMismatchError
from scalike.support.iterables import MISSING, lookup
from scalike.support.json import dumps, to_jsonable

if TYPE_CHECKING:
    from scalike.collections.seq import Seq

T = TypeVar("T")
U = TypeVar("U")


def _is_none_sentinel(value: Any, none: Any) -> bool:
    return value is none or (type(value) is type(none) and value == none)


class Option(abc.ABC, Generic[T]):
    """A container holding zero (``Nothing``) or one (``Some``) value."""

    __slots__ = ()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def of(value: Any, none: Any = None) -> "Option[Any]":
        """``Nothing`` when *value* equals the *none* sentinel, else ``Some(value)``."""
        return Nothing() if _is_none_sentinel(value, none) else Some(value)

    @staticmethod
    def from_field(container: Any, name: Any, none: Any = None) -> "Option[Any]":
        """Option of ``container[name]`` (or attribute *name*); ``Nothing`` when absent."""
        value = lookup(container, name)
        if value is MISSING:
            return Nothing()
        return Option.of(value, none)

    @staticmethod
    def some(value: T) -> "Some[T]":
        return Some(value)

    @staticmethod
    def none() -> "Nothing[Any]":
        return Nothing()

    # ------------------------------------------------------------------
    # Variant-specific behaviour
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def is_defined(self) -> bool: ...

    @abc.abstractmethod
    def get(self) -> T: ...

    @abc.abstractmethod
    def get_or_else(self, default: U) -> T | U: ...

    @abc.abstractmethod
    def get_or_call(self, f: Callable[[], U]) -> T | U: ...

    @abc.abstractmethod
    def get_or_raise(self, exc: BaseException | type[BaseException]) -> T: ...

    @abc.abstractmethod
    def map(self, f: Callable[[T], U]) -> "Option[U]": ...

    @abc.abstractmethod
    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]": ...

    @abc.abstractmethod
    def filter(self, p: Callable[[T], bool]) -> "Option[T]": ...

    @abc.abstractmethod
    def or_else(self, alternative: "Option[T]") -> "Option[T]": ...

    @abc.abstractmethod
    def or_else_call(self, f: Callable[[], "Option[T]"]) -> "Option[T]": ...

    @abc.abstractmethod
    def pick(self, name: Any) -> "Option[Any]": ...

    @abc.abstractmethod
    def json_serialize(self) -> Any: ...

    @abc.abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    # ------------------------------------------------------------------
    # Shared behaviour
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self.is_defined()

    def non_empty(self) -> bool:
        return self.is_defined()

    def or_none(self) -> T | None:
        return self.get_or_else(None)

    def filter_not(self, p: Callable[[T], bool]) -> "Option[T]":
        return self.filter(lambda value: not p(value))

    def find(self, p: Callable[[T], bool]) -> "Option[T]":
        return self.filter(p)

    def exists(self, p: Callable[[T], bool]) -> bool:
        return any(p(value) for value in self)

    def for_all(self, p: Callable[[T], bool]) -> bool:
        return all(p(value) for value in self)

    def each(self, f: Callable[[T], Any]) -> None:
        for value in self:
            f(value)

    def fold(self, z: U, op: Callable[[U, T], U]) -> U:
        for value in self:
            z = op(z, value)
        return z

    def flatten(self) -> "Option[Any]":
        return self.flat_map(lambda value: value)

    def size(self) -> int:
        return 1 if self.is_defined() else 0

    def count(self, p: Callable[[T], bool] | None = None) -> int:
        return sum(1 for value in self if p is None or p(value))

    def head(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("head")
        return self.get()

    def head_option(self) -> "Option[T]":
        return self

    last = head
    last_option = head_option

    def max(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("max")
        return self.get()

    def min(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("min")
        return self.get()

    def max_by(self, f: Callable[[T], Any]) -> T:  # noqa: ARG002
        return self.max()

    def min_by(self, f: Callable[[T], Any]) -> T:  # noqa: ARG002
        return self.min()

    def sum(self) -> Any:
        return self.fold(0, lambda acc, value: acc + value)

    def sum_by(self, f: Callable[[T], Any]) -> Any:
        return self.fold(0, lambda acc, value: acc + f(value))

    def take(self, n: int) -> "Option[T]":
        return Nothing() if n <= 0 else self

    take_right = take

    def drop(self, n: int) -> "Option[T]":
        return self if n <= 0 else Nothing()

    def to_list(self) -> list[T]:
        return list(self)

    def to_seq(self) -> "Seq[T]":
        from scalike.collections.seq import Seq

        return Seq.of(*self)

    def mk_string(self, sep: str = "") -> str:
        return sep.join(str(value) for value in self)

    def to_json(self, **kwargs: Any) -> str:
        return dumps(self, **kwargs)

    def __len__(self) -> int:
        return self.size()


@final
class Some(Option[T]):
    """Option with a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_defined(self) -> bool:
        return True

    def get(self) -> T:
        return self._value

    def get_or_else(self, default: U) -> T:  # noqa: ARG002
        return self._value

    def get_or_call(self, f: Callable[[], U]) -> T:  # noqa: ARG002
        return self._value

    def get_or_raise(self, exc: BaseException | type[BaseException]) -> T:  # noqa: ARG002
        return self._value

    def map(self, f: Callable[[T], U]) -> "Some[U]":
        return Some(f(self._value))

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        result = f(self._value)
        if not isinstance(result, Option):
            raise TypeMismatchError.unexpected(
                "Option.flat_map", "a function returning an Option", result
            )
        return result

    def filter(self, p: Callable[[T], bool]) -> Option[T]:
        return self if p(self._value) else Nothing()

    def or_else(self, alternative: Option[T]) -> Option[T]:  # noqa: ARG002
        return self

    def or_else_call(self, f: Callable[[], Option[T]]) -> Option[T]:  # noqa: ARG002
        return self

    def pick(self, name: Any) -> Option[Any]:
        return Option.from_field(self._value, name)

    def json_serialize(self) -> Any:
        return to_jsonable(self._value)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


@final
class Nothing(Option[T]):
    """Empty option; every ``Nothing()`` call returns the same instance."""

    __slots__ = ()

    _instance: "Nothing[Any] | None" = None

    def __new__(cls) -> "Nothing[Any]":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_defined(self) -> bool:
        return False

    def get(self) -> NoReturn:
        raise EmptyValueError("get")

    def get_or_else(self, default: U) -> U:
        return default

    def get_or_call(self, f: Callable[[], U]) -> U:
        return f()

    def get_or_raise(self, exc: BaseException | type[BaseException]) -> NoReturn:
        raise exc

    def map(self, f: Callable[[T], U]) -> "Nothing[U]":  # noqa: ARG002
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T], Option[U]]) -> "Nothing[U]":  # noqa: ARG002
        return self  # type: ignore[return-value]

    def filter(self, p: Callable[[T], bool]) -> "Nothing[T]":  # noqa: ARG002
        return self

    def or_else(self, alternative: Option[T]) -> Option[T]:
        return alternative

    def or_else_call(self, f: Callable[[], Option[T]]) -> Option[T]:
        return f()

    def pick(self, name: Any) -> "Nothing[Any]":  # noqa: ARG002
        return self

    def json_serialize(self) -> None:
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __repr__(self) -> str:
        return "Nothing"


__all__ = ["Nothing", "Option", "Some"]
