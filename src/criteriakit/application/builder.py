"""Fluent builder chaining criteria and ordering.

Example:
    query = (
        CriteriaBuilder[Person]()
        .add_criteria(adults)
        .add_criteria(in_city("Paris"))
        .set_order_by("age", "desc")
        .build()
    )
    query.evaluate(people)
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Self

from criteriakit.domain.criteria import Criteria
from criteriakit.domain.ordering import OrderBy, SortDirection

if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence

    from criteriakit.domain.types import KeySelector


@dataclass(frozen=True, slots=True)
class BuiltCriteria[T](Criteria[T]):
    """Immutable composite produced by CriteriaBuilder.build().

    Folds items through each stage left to right, then sorts.

    Attributes:
        stages: Snapshot of builder chain
        order_by: Optional final ordering
    """

    stages: tuple[Criteria[T], ...] = ()
    order_by: OrderBy[T] | None = None

    @property
    def label(self) -> str:
        return "CHAIN"

    @property
    def children(self) -> tuple[Criteria[T], ...]:
        return self.stages

    def evaluate(self, items: Sequence[T]) -> list[T]:
        result = reduce(lambda acc, stage: stage.evaluate(acc), self.stages, list(items))
        if self.order_by is not None:
            result = self.order_by.apply(result)
        return result


class CriteriaBuilder[T]:
    """Mutable accumulator of criteria chain and ordering.

    Configuration methods return self for chaining.
    Not thread-safe: configure from one thread, then build.
    """

    def __init__(self) -> None:
        self._chain: list[Criteria[T]] = []
        self._order_by: OrderBy[T] | None = None

    def add_criteria(self, criteria: Criteria[T]) -> Self:
        """Append criteria to chain.

        Args:
            criteria: Criteria applied after all previously added

        Returns:
            Self for chaining

        Raises:
            TypeError: If criteria is None or not Criteria
        """
        if criteria is None:
            raise TypeError("criteria must not be None")
        if not isinstance(criteria, Criteria):
            raise TypeError(f"criteria must be Criteria, got {type(criteria).__name__}")
        self._chain.append(criteria)
        return self

    def set_order_by(
        self,
        attribute: Hashable | KeySelector[T],
        direction: SortDirection | str = SortDirection.ASC,
    ) -> Self:
        """Set final ordering. Replaces previous ordering.

        Args:
            attribute: Field name, mapping key, sequence index or key selector
            direction: "asc" (default) or "desc"

        Returns:
            Self for chaining
        """
        self._order_by = OrderBy(attribute, direction)
        return self

    def build(self) -> BuiltCriteria[T]:
        """Snapshot current chain and ordering into composite.

        Later builder changes do not affect returned composite.

        Returns:
            Immutable BuiltCriteria
        """
        return BuiltCriteria(stages=tuple(self._chain), order_by=self._order_by)
