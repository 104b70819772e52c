"""Composite criteria: AND, OR, NOT composition.

Membership (OR dedup, NOT exclusion):
- immutable scalars (int, float, complex, str, bytes, bool, None) by value
- everything else by object identity: distinct but equal records are
  kept apart, unhashable records are supported
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING

from criteriakit.domain.criteria import Criteria, PredicateCriteria

if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence

_VALUE_TYPES = (int, float, complex, str, bytes, bool, type(None))


def _require(criteria: Criteria | None, name: str) -> None:
    """Validate sub-criteria argument. FAIL-FIRST."""
    if criteria is None:
        raise TypeError(f"{name} must not be None")
    if not isinstance(criteria, Criteria):
        raise TypeError(f"{name} must be Criteria, got {type(criteria).__name__}")


def membership_key(item: object) -> Hashable:
    """Key deciding whether two items are the same member.

    Tagged so a scalar value never collides with an object id.
    """
    if isinstance(item, _VALUE_TYPES):
        return ("value", item)
    return ("id", id(item))


@dataclass(frozen=True, slots=True)
class AndCriteria[T](Criteria[T]):
    """Sequential narrowing: other sees only criteria's output.

    Put the more selective criteria first.
    """

    criteria: Criteria[T]
    other: Criteria[T]

    def __post_init__(self) -> None:
        _require(self.criteria, "criteria")
        _require(self.other, "other")

    @property
    def label(self) -> str:
        return "AND"

    @property
    def children(self) -> tuple[Criteria[T], ...]:
        return (self.criteria, self.other)

    def evaluate(self, items: Sequence[T]) -> list[T]:
        return self.other.evaluate(self.criteria.evaluate(items))


@dataclass(frozen=True, slots=True)
class OrCriteria[T](Criteria[T]):
    """Union of both criteria, each evaluated against the original items.

    Order: criteria's matches, then other's matches not already included.
    """

    criteria: Criteria[T]
    other: Criteria[T]

    def __post_init__(self) -> None:
        _require(self.criteria, "criteria")
        _require(self.other, "other")

    @property
    def label(self) -> str:
        return "OR"

    @property
    def children(self) -> tuple[Criteria[T], ...]:
        return (self.criteria, self.other)

    def evaluate(self, items: Sequence[T]) -> list[T]:
        first = self.criteria.evaluate(items)
        second = self.other.evaluate(items)

        seen: set[Hashable] = set()
        result: list[T] = []
        for item in (*first, *second):
            key = membership_key(item)
            if key not in seen:
                seen.add(key)
                result.append(item)
        return result


@dataclass(frozen=True, slots=True)
class NotCriteria[T](Criteria[T]):
    """Complement of wrapped criteria within the input items."""

    criteria: Criteria[T]

    def __post_init__(self) -> None:
        _require(self.criteria, "criteria")

    @property
    def label(self) -> str:
        return "NOT"

    @property
    def children(self) -> tuple[Criteria[T], ...]:
        return (self.criteria,)

    def evaluate(self, items: Sequence[T]) -> list[T]:
        excluded = {membership_key(item) for item in self.criteria.evaluate(items)}
        return [item for item in items if membership_key(item) not in excluded]


def all_of[T](*criteria: Criteria[T]) -> Criteria[T]:
    """Create criteria that requires ALL criteria to pass (AND).

    Args:
        *criteria: Criteria to compose, applied left to right.

    Returns:
        Left-nested AndCriteria chain.
        Empty criteria = keeps everything.
    """
    if not criteria:
        return PredicateCriteria(lambda _: True, name="ALL")
    return reduce(AndCriteria, criteria)


def any_of[T](*criteria: Criteria[T]) -> Criteria[T]:
    """Create criteria that requires ANY criteria to pass (OR).

    Args:
        *criteria: Criteria to compose. Result order follows argument order.

    Returns:
        Left-nested OrCriteria chain.
        Empty criteria = keeps nothing.
    """
    if not criteria:
        return PredicateCriteria(lambda _: False, name="NONE")
    return reduce(OrCriteria, criteria)


def negate[T](criteria: Criteria[T]) -> Criteria[T]:
    """Create criteria that negates another criteria (NOT).

    Args:
        criteria: Criteria to negate.

    Returns:
        NotCriteria wrapping input.
    """
    return NotCriteria(criteria)
