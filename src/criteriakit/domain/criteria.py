"""Criteria: reusable filter rules over in-memory sequences.

Criteria.evaluate is a stable filter: output is a subsequence of input,
relative order preserved. Empty input = empty output.

Usage:
    adults = Criteria.create(lambda p: p.age >= 18, name="adult")
    adults.evaluate(people)

    # Operators compose criteria
    (adults & ~retired).evaluate(people)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from criteriakit.domain.combinators import AndCriteria, NotCriteria, OrCriteria
    from criteriakit.domain.types import Predicate


class Criteria[T](ABC):
    """Filter rule over a sequence of items.

    Implementations must be pure: evaluate depends only on input
    and construction-time configuration.
    """

    __slots__ = ()

    @abstractmethod
    def evaluate(self, items: Sequence[T]) -> list[T]:
        """Return items satisfying this criteria.

        Args:
            items: Items to filter (not mutated).

        Returns:
            New list with matching items in original order.
        """

    @staticmethod
    def create[U](predicate: Predicate[U], name: str | None = None) -> PredicateCriteria[U]:
        """Wrap predicate function into Criteria.

        Args:
            predicate: Function returning True for items to keep.
            name: Label for rendering. Default: predicate __name__.

        Returns:
            Criteria keeping items for which predicate is true.

        Raises:
            TypeError: If predicate is None or not callable
        """
        return PredicateCriteria(predicate, name)

    @property
    def label(self) -> str:
        """Human-readable node name."""
        return type(self).__name__

    @property
    def children(self) -> tuple[Criteria[T], ...]:
        """Sub-criteria this criteria delegates to. Leaves have none."""
        return ()

    def __and__(self, other: object) -> AndCriteria[T]:
        from criteriakit.domain.combinators import AndCriteria

        if not isinstance(other, Criteria):
            return NotImplemented
        return AndCriteria(self, other)

    def __or__(self, other: object) -> OrCriteria[T]:
        from criteriakit.domain.combinators import OrCriteria

        if not isinstance(other, Criteria):
            return NotImplemented
        return OrCriteria(self, other)

    def __invert__(self) -> NotCriteria[T]:
        from criteriakit.domain.combinators import NotCriteria

        return NotCriteria(self)


@dataclass(frozen=True, slots=True, repr=False)
class PredicateCriteria[T](Criteria[T]):
    """Criteria backed by a plain predicate function.

    Attributes:
        predicate: Function returning True for items to keep
        name: Label for rendering. Default: predicate __name__
    """

    predicate: Predicate[T]
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate predicate. FAIL-FIRST."""
        if self.predicate is None:
            raise TypeError("predicate must not be None")
        if not callable(self.predicate):
            raise TypeError(f"predicate must be callable, got {type(self.predicate).__name__}")
        if not self.name:
            object.__setattr__(self, "name", getattr(self.predicate, "__name__", "predicate"))

    @property
    def label(self) -> str:
        return self.name

    def evaluate(self, items: Sequence[T]) -> list[T]:
        # Predicate errors propagate to caller
        return [item for item in items if self.predicate(item)]

    def __repr__(self) -> str:
        return f"PredicateCriteria({self.name!r})"
