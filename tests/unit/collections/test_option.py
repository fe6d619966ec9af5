"""Unit tests for Option / Some / Nothing."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from scalike import (
    EmptyCollectionError,
    EmptyValueError,
    Nothing,
    Option,
    Seq,
    Some,
    TypeMismatchError,
)


@dataclass
class User:
    name: str
    email: str | None = None


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestOptionConstruction:
    def test_of_value_is_some(self) -> None:
        assert Option.of(5) == Some(5)

    def test_of_none_is_nothing(self) -> None:
        assert Option.of(None) is Nothing()

    def test_of_custom_sentinel(self) -> None:
        assert Option.of(-1, none=-1) is Nothing()
        assert Option.of(0, none=-1) == Some(0)

    def test_sentinel_does_not_match_other_types(self) -> None:
        assert Option.of(False, none=0) == Some(False)

    def test_some_may_hold_none(self) -> None:
        opt = Option.some(None)
        assert opt.is_defined()
        assert opt.get() is None
        assert opt != Nothing()

    def test_none_is_singleton(self) -> None:
        assert Option.none() is Option.none()
        assert Nothing() is Option.none()

    def test_from_field_mapping(self) -> None:
        assert Option.from_field({"a": 1}, "a") == Some(1)
        assert Option.from_field({"a": 1}, "b") is Nothing()

    def test_from_field_mapping_value_none(self) -> None:
        assert Option.from_field({"a": None}, "a") is Nothing()

    def test_from_field_sequence_index(self) -> None:
        assert Option.from_field(["x", "y"], 1) == Some("y")
        assert Option.from_field(["x", "y"], 2) is Nothing()
        assert Option.from_field(["x", "y"], -1) is Nothing()

    def test_from_field_attribute(self) -> None:
        assert Option.from_field(User("ada"), "name") == Some("ada")
        assert Option.from_field(User("ada"), "email") is Nothing()
        assert Option.from_field(User("ada"), "missing") is Nothing()


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


class TestOptionAccessors:
    def test_get_on_nothing_raises(self) -> None:
        with pytest.raises(EmptyValueError):
            Nothing().get()

    def test_empty_value_error_is_empty_collection_error(self) -> None:
        with pytest.raises(EmptyCollectionError):
            Option.none().get()

    def test_get_or_else(self) -> None:
        assert Option.none().get_or_else(42) == 42
        assert Some(1).get_or_else(42) == 1

    def test_get_or_call_not_invoked_on_some(self) -> None:
        calls: list[int] = []

        def supplier() -> int:
            calls.append(1)
            return 0

        assert Some(3).get_or_call(supplier) == 3
        assert calls == []
        assert Nothing().get_or_call(supplier) == 0
        assert calls == [1]

    def test_get_or_raise(self) -> None:
        assert Some(1).get_or_raise(LookupError("x")) == 1
        with pytest.raises(LookupError):
            Nothing().get_or_raise(LookupError("x"))

    def test_or_none(self) -> None:
        assert Some(2).or_none() == 2
        assert Nothing().or_none() is None

    def test_or_else(self) -> None:
        assert Nothing().or_else(Some(1)) == Some(1)
        assert Some(2).or_else(Some(1)) == Some(2)
        assert Nothing().or_else_call(lambda: Some(3)) == Some(3)

    def test_head_and_last(self) -> None:
        assert Some(4).head() == 4
        assert Some(4).last() == 4
        assert Nothing().head_option() is Nothing()
        with pytest.raises(EmptyCollectionError):
            Nothing().last()


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestOptionCombinators:
    def test_filter_rejecting_gives_nothing(self) -> None:
        assert Option.of(5).filter(lambda x: x > 10) is Nothing()

    def test_filter_not(self) -> None:
        assert Some(5).filter_not(lambda x: x > 10) == Some(5)

    def test_map(self) -> None:
        assert Some(2).map(lambda x: x * 10) == Some(20)
        assert Nothing().map(lambda x: x * 10) is Nothing()

    def test_map_to_none_stays_some(self) -> None:
        assert Some(2).map(lambda x: None) == Some(None)

    def test_flat_map(self) -> None:
        assert Some(2).flat_map(lambda x: Some(x + 1)) == Some(3)
        assert Some(2).flat_map(lambda x: Nothing()) is Nothing()

    def test_flat_map_requires_option(self) -> None:
        with pytest.raises(TypeMismatchError):
            Some(2).flat_map(lambda x: x + 1)

    def test_flatten(self) -> None:
        assert Some(Some(1)).flatten() == Some(1)
        assert Nothing().flatten() is Nothing()
        with pytest.raises(TypeMismatchError):
            Some(1).flatten()

    def test_pick(self) -> None:
        assert Some({"id": 7}).pick("id") == Some(7)
        assert Some({"id": 7}).pick("name") is Nothing()
        assert Nothing().pick("id") is Nothing()

    def test_fold_and_queries(self) -> None:
        assert Some(3).fold(10, lambda acc, x: acc + x) == 13
        assert Nothing().fold(10, lambda acc, x: acc + x) == 10
        assert Some(3).exists(lambda x: x == 3)
        assert Nothing().for_all(lambda x: False)
        assert Some(3).find(lambda x: x > 5) is Nothing()

    def test_each(self) -> None:
        seen: list[int] = []
        Some(1).each(seen.append)
        Nothing().each(seen.append)
        assert seen == [1]

    def test_size_and_count(self) -> None:
        assert Some(1).size() == 1
        assert len(Nothing()) == 0
        assert Some(1).count(lambda x: x > 5) == 0

    def test_take_and_drop(self) -> None:
        assert Some(1).take(1) == Some(1)
        assert Some(1).take(0) is Nothing()
        assert Some(1).take_right(-1) is Nothing()
        assert Some(1).drop(0) == Some(1)
        assert Some(1).drop(1) is Nothing()

    def test_max_min_on_nothing_raise(self) -> None:
        with pytest.raises(EmptyCollectionError):
            Nothing().max()
        with pytest.raises(EmptyCollectionError):
            Nothing().min_by(lambda x: x)

    def test_sum(self) -> None:
        assert Some(4).sum() == 4
        assert Nothing().sum() == 0
        assert Some(4).sum_by(lambda x: x * 2) == 8


# ---------------------------------------------------------------------------
# Conversions & protocols
# ---------------------------------------------------------------------------


class TestOptionConversions:
    def test_to_list(self) -> None:
        assert Some(1).to_list() == [1]
        assert Nothing().to_list() == []

    def test_to_seq(self) -> None:
        assert Some(1).to_seq() == Seq.of(1)
        assert Nothing().to_seq() is Seq.empty()

    def test_iteration(self) -> None:
        assert [x for x in Some("a")] == ["a"]
        assert list(Nothing()) == []

    def test_mk_string(self) -> None:
        assert Some(1).mk_string() == "1"
        assert Nothing().mk_string(",") == ""

    def test_hash_and_equality(self) -> None:
        assert hash(Some(1)) == hash(Some(1))
        assert {Some(1), Some(1), Nothing()} == {Some(1), Nothing()}
        assert Some(1) != 1

    def test_repr(self) -> None:
        assert repr(Some("x")) == "Some('x')"
        assert repr(Nothing()) == "Nothing"

    def test_json(self) -> None:
        assert Some(Seq.of(1, 2)).json_serialize() == [1, 2]
        assert Nothing().to_json() == "null"
        assert Some({"a": 1}).to_json() == '{"a": 1}'
