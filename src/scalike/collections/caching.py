"""CachingIterator – makes a single-pass iterator safely re-iterable.

Every ``iter()`` over the adapter first replays what has already been pulled,
then continues pulling the shared source from where it stopped, appending each
new item to the cache before handing it on.  The source is never restarted and
no position is pulled twice, however many consumers interleave: consumers
replay by index, so items pulled by one become visible to all the others.

Usage::

    rows = CachingIterator(read_rows())
    first = next(iter(rows))     # pulls one row
    everything = list(rows)      # replays it, pulls the rest
    again = list(rows)           # served from the cache
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

from scalike.observability.logging import get_logger, tracing_enabled

T = TypeVar("T")

logger = get_logger(__name__)


class CachingIterator(Generic[T]):
    """Rewindable view over a one-shot iterator.

    The adapter exclusively owns *source*: nothing else should advance it.
    When the source raises, the error is kept and raised again to any consumer
    that reaches the same position.
    """

    __slots__ = ("_source", "_cache", "_exhausted", "_error")

    def __init__(self, source: Iterator[T]) -> None:
        self._source = source
        self._cache: list[T] = []
        self._exhausted = False
        self._error: BaseException | None = None

    @property
    def cached(self) -> int:
        """Number of items pulled from the source so far."""
        return len(self._cache)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> Iterator[T]:
        index = 0
        while True:
            if index < len(self._cache):
                yield self._cache[index]
            elif self._pull():
                yield self._cache[index]
            else:
                return
            index += 1

    def _pull(self) -> bool:
        """Append the next source item to the cache; False once exhausted."""
        if self._exhausted:
            return False
        if self._error is not None:
            raise self._error
        try:
            item = next(self._source)
        except StopIteration:
            self._exhausted = True
            self._source = iter(())
            if tracing_enabled():
                logger.debug("caching_iterator.exhausted", cached=len(self._cache))
            return False
        except Exception as exc:
            self._error = exc
            if tracing_enabled():
                logger.debug(
                    "caching_iterator.source_failed",
                    cached=len(self._cache),
                    error=repr(exc),
                )
            raise
        self._cache.append(item)
        return True

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "open"
        return f"CachingIterator(cached={len(self._cache)}, {state})"


def deferred(factory: Callable[[], Iterable[T]]) -> Iterator[T]:
    """One-shot iterator that calls *factory* on its first pull and yields its items.

    Wrapped in a :class:`CachingIterator`, *factory* runs at most once however
    many times the result is read.
    """
    yield from factory()


__all__ = ["CachingIterator", "deferred"]
