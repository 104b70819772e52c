"""Tests for domain/ordering.py."""

from dataclasses import FrozenInstanceError

import pytest

from criteriakit.domain.ordering import OrderBy, SortDirection, select_attribute
from tests.factories import Person, make_people, names


class TestSortDirection:
    """Tests for SortDirection enum."""

    def test_values(self) -> None:
        assert SortDirection.ASC == "asc"
        assert SortDirection.DESC == "desc"

    def test_from_string(self) -> None:
        assert SortDirection("desc") is SortDirection.DESC


class TestOrderByCreation:
    """Tests for OrderBy construction."""

    def test_default_direction_ascending(self) -> None:
        assert OrderBy("age").direction is SortDirection.ASC

    def test_string_direction_coerced(self) -> None:
        assert OrderBy("age", "desc").direction is SortDirection.DESC

    def test_unknown_direction_raises(self) -> None:
        with pytest.raises(ValueError):
            OrderBy("age", "sideways")

    def test_none_attribute_raises(self) -> None:
        with pytest.raises(TypeError, match="attribute must not be None"):
            OrderBy(None)  # type: ignore[arg-type]

    def test_unknown_attribute_not_validated(self) -> None:
        OrderBy("salary")

    def test_is_frozen(self) -> None:
        order = OrderBy("age")
        with pytest.raises(FrozenInstanceError):
            order.attribute = "name"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(OrderBy("age", "desc")) == "age DESC"


class TestOrderByApply:
    """Tests for OrderBy.apply."""

    def test_ascending(self) -> None:
        result = OrderBy("age").apply(make_people())
        assert [p.age for p in result] == [16, 17, 25, 30, 35, 35, 42, 51]

    def test_descending(self) -> None:
        result = OrderBy("age", "desc").apply(make_people())
        assert [p.age for p in result] == [51, 42, 35, 35, 30, 25, 17, 16]

    def test_ascending_stable_on_ties(self) -> None:
        # Charlie precedes Alex in input, both 35
        result = names(OrderBy("age").apply(make_people()))
        assert result.index("Charlie") < result.index("Alex")

    def test_descending_stable_on_ties(self) -> None:
        result = names(OrderBy("age", "desc").apply(make_people()))
        assert result.index("Charlie") < result.index("Alex")

    def test_strings_lexicographic(self) -> None:
        result = names(OrderBy("name").apply(make_people()))
        assert result == sorted(result)
        assert result[0] == "Alex"

    def test_mapping_items(self) -> None:
        rows = [{"k": 3}, {"k": 1}, {"k": 2}]
        assert OrderBy("k").apply(rows) == [{"k": 1}, {"k": 2}, {"k": 3}]

    def test_key_selector(self) -> None:
        result = OrderBy(lambda p: len(p.name)).apply(make_people())
        assert names(result)[:3] == ["Bob", "Eve", "Dana"]

    def test_input_not_mutated(self) -> None:
        people = make_people()
        before = list(people)
        OrderBy("age").apply(people)
        assert people == before

    def test_empty(self) -> None:
        assert OrderBy("age").apply([]) == []

    def test_missing_attribute_raises_on_apply(self) -> None:
        with pytest.raises(AttributeError):
            OrderBy("salary").apply(make_people())

    def test_missing_key_raises_on_apply(self) -> None:
        with pytest.raises(KeyError):
            OrderBy("k").apply([{"k": 1}, {"j": 2}])

    def test_incomparable_values_raise(self) -> None:
        people = [Person("A", 1, "x"), Person("B", 2, "y")]
        people[1].age = "two"  # type: ignore[assignment]
        with pytest.raises(TypeError):
            OrderBy("age").apply(people)


class TestSelectAttribute:
    """Tests for select_attribute."""

    def test_object(self) -> None:
        assert select_attribute(Person("A", 1, "x"), "city") == "x"

    def test_mapping(self) -> None:
        assert select_attribute({"city": "y"}, "city") == "y"


class TestSequenceRecords:
    """Non-string attributes index sequence records."""

    def test_tuple_position(self) -> None:
        rows = [("b", 2), ("c", 3), ("a", 1)]
        assert OrderBy(1).apply(rows) == [("a", 1), ("b", 2), ("c", 3)]

    def test_tuple_position_descending_stable(self) -> None:
        rows = [("x", 1), ("y", 2), ("z", 1)]
        assert OrderBy(1, "desc").apply(rows) == [("y", 2), ("x", 1), ("z", 1)]

    def test_int_key_on_mapping(self) -> None:
        rows = [{0: "b"}, {0: "a"}]
        assert OrderBy(0).apply(rows) == [{0: "a"}, {0: "b"}]

    def test_select_sequence_index(self) -> None:
        assert select_attribute(["a", "b"], 1) == "b"

    def test_missing_position_raises_on_apply(self) -> None:
        with pytest.raises(IndexError):
            OrderBy(5).apply([("a", 1), ("b", 2)])

    def test_int_attribute_on_object_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            OrderBy(0).apply(make_people())

    def test_str_shows_position(self) -> None:
        assert str(OrderBy(1, "desc")) == "1 DESC"
