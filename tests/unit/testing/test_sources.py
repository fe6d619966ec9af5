"""Unit tests for CountingSource."""
from __future__ import annotations

from scalike.collections import Seq
from scalike.testing import CountingSource


class TestCountingSource:
    def test_counts_pulls(self) -> None:
        source = CountingSource([1, 2, 3])
        iterator = iter(source)
        assert next(iterator) == 1
        assert source.pulls == 1
        assert list(iterator) == [2, 3]
        assert source.pulls == 3
        assert source.exhausted

    def test_iter_returns_itself(self) -> None:
        source = CountingSource([1])
        assert iter(source) is source
        assert iter(iter(source)) is source

    def test_never_rewinds(self) -> None:
        source = CountingSource([1, 2])
        assert list(source) == [1, 2]
        assert list(source) == []
        assert source.pulls == 2

    def test_accepts_any_iterable(self) -> None:
        assert list(CountingSource(range(2))) == [0, 1]

    def test_repr(self) -> None:
        source = CountingSource("ab")
        next(iter(source))
        assert repr(source) == "CountingSource(pulls=1, size=2)"

    def test_partly_consumed_source_feeds_a_seq(self) -> None:
        source = CountingSource([1, 2, 3])
        next(source)
        seq = Seq.from_iterable(iter(source))
        assert seq.to_list() == [2, 3]
        assert seq.to_list() == [2, 3]
        assert source.pulls == 3
