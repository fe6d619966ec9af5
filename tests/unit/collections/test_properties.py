"""Property-based tests: eager and lazy Seq/Map agree and keep their laws."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from scalike import Map, Seq
from scalike.testing import CountingSource, maps, seqs

ints = st.lists(st.integers(min_value=-50, max_value=50), max_size=30)


def _is_even(x: int) -> bool:
    return x % 2 == 0


# ---------------------------------------------------------------------------
# Seq laws
# ---------------------------------------------------------------------------


class TestSeqLaws:
    @given(seqs())
    def test_filter_then_for_all(self, s: Seq[int]) -> None:
        assert s.filter(_is_even).for_all(_is_even)

    @given(seqs())
    def test_reverse_twice_is_identity(self, s: Seq[int]) -> None:
        assert s.reverse().reverse().to_list() == s.to_list()

    @given(seqs(), st.integers(min_value=0, max_value=40))
    def test_take_bounds_size(self, s: Seq[int], n: int) -> None:
        assert s.take(n).size() <= n

    @given(seqs(), st.integers(min_value=0, max_value=40))
    def test_take_append_drop_rebuilds(self, s: Seq[int], n: int) -> None:
        assert s.take(n).append(s.drop(n)).to_list() == s.to_list()

    @given(seqs(), st.integers(min_value=-5, max_value=-1))
    def test_negative_take_is_self(self, s: Seq[int], n: int) -> None:
        assert s.take(n) is s

    @given(seqs())
    def test_take_zero_and_take_right_zero_are_empty(self, s: Seq[int]) -> None:
        assert s.take(0).is_empty()
        assert s.take_right(0).is_empty()

    @given(seqs())
    def test_distinct_keeps_first_occurrences(self, s: Seq[int]) -> None:
        assert s.distinct().to_list() == list(dict.fromkeys(s.to_list()))

    @given(st.lists(st.tuples(st.integers(0, 3), st.integers()), max_size=20))
    def test_sort_by_is_stable(self, rows: list[tuple[int, int]]) -> None:
        expected = sorted(rows, key=lambda r: r[0])
        assert Seq.of(*rows).sort_by(0).to_list() == expected
        assert Seq.from_iterable(iter(rows)).sort_by(lambda r: r[0]).to_list() == expected


# ---------------------------------------------------------------------------
# Eager / lazy equivalence
# ---------------------------------------------------------------------------


class TestEagerLazyEquivalence:
    @given(ints)
    def test_pipelines_agree(self, xs: list[int]) -> None:
        def pipeline(s: Seq[int]) -> list[int]:
            return (
                s.map(lambda x: x * 3)
                .filter(lambda x: x % 2 != 0)
                .flat_map(lambda x: [x, -x])
                .distinct()
                .drop(1)
                .take(10)
                .to_list()
            )

        assert pipeline(Seq.of(*xs)) == pipeline(Seq.from_iterable(iter(xs)))

    @given(ints)
    def test_queries_agree(self, xs: list[int]) -> None:
        eager, lazy = Seq.of(*xs), Seq.from_iterable(iter(xs))
        assert eager.size() == lazy.size()
        assert eager.sum() == lazy.sum()
        assert eager.head_option() == lazy.head_option()
        assert eager.last_option() == lazy.last_option()
        assert eager.index_of(0) == lazy.index_of(0)
        assert eager.group_by(_is_even).map_values(lambda g: g.to_list()).to_dict() == (
            lazy.group_by(_is_even).map_values(lambda g: g.to_list()).to_dict()
        )
        assert eager == lazy

    @given(ints)
    def test_source_pulled_once(self, xs: list[int]) -> None:
        source = CountingSource(xs)
        s = Seq.from_iterable(source)
        s.to_list()
        s.count()
        s.to_list()
        list(s)
        assert source.pulls == len(xs)


# ---------------------------------------------------------------------------
# Map laws
# ---------------------------------------------------------------------------


class TestMapLaws:
    @given(maps())
    def test_to_seq_to_map_round_trip(self, m: Map[str, int]) -> None:
        rebuilt = m.to_seq().to_map(lambda pair: pair[0]).map_values(lambda pair: pair[1])
        assert rebuilt.to_dict() == m.to_dict()

    @given(maps(), st.text(alphabet="abc", min_size=1, max_size=2), st.integers())
    def test_append_overwrites_in_place(self, m: Map[str, int], key: str, value: int) -> None:
        before = m.keys().to_list()
        after = m.append(key, value)
        assert after.get(key).get() == value
        if key in before:
            assert after.keys().to_list() == before

    @given(maps())
    def test_filter_keeps_matching_values(self, m: Map[str, int]) -> None:
        assert m.filter(lambda v, k: _is_even(v)).for_all(lambda v, k: _is_even(v))

    def test_empty_group_by_is_empty(self) -> None:
        assert Map.empty().group_by(lambda v: v).is_empty()
