"""Sort ordering by a single attribute.

Sorting is stable in both directions: items with equal keys keep
their relative input order. Descending inverts comparison, it does
not reverse the ascending result.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from criteriakit.domain.types import KeySelector


class SortDirection(StrEnum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


def select_attribute(item: object, attribute: Hashable) -> object:
    """Read attribute value from item.

    Mappings are indexed by key. Non-string attributes index the item
    (tuple position, list index). String attributes use getattr.

    Raises:
        KeyError: Mapping item has no such key
        IndexError: Sequence item has no such position
        AttributeError: Object item has no such attribute
        TypeError: Item does not support indexing
    """
    if isinstance(item, Mapping) or not isinstance(attribute, str):
        return item[attribute]
    return getattr(item, attribute)


@dataclass(frozen=True, slots=True)
class OrderBy[T]:
    """Sort directive: attribute + direction.

    Attribute is not validated here; missing attributes fail on apply.

    Attributes:
        attribute: Field name, mapping key, sequence index or key selector function
        direction: ASC or DESC ("asc"/"desc" strings accepted)
    """

    attribute: Hashable | KeySelector[T]
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        """Normalize direction. FAIL-FIRST."""
        if self.attribute is None:
            raise TypeError("attribute must not be None")
        # Unknown direction strings raise ValueError
        object.__setattr__(self, "direction", SortDirection(self.direction))

    @property
    def key(self) -> KeySelector[T]:
        """Key function extracting the compared value."""
        attribute = self.attribute
        if callable(attribute):
            return attribute
        return lambda item: select_attribute(item, attribute)

    @property
    def attribute_name(self) -> str:
        """Attribute name for display."""
        if isinstance(self.attribute, str):
            return self.attribute
        if callable(self.attribute):
            return getattr(self.attribute, "__name__", repr(self.attribute))
        return repr(self.attribute)

    def apply(self, items: Sequence[T]) -> list[T]:
        """Sort items by attribute.

        Args:
            items: Items to sort (not mutated).

        Returns:
            New sorted list.

        Raises:
            KeyError, IndexError, AttributeError: Attribute missing on some item
            TypeError: Attribute values not comparable
        """
        return sorted(items, key=self.key, reverse=self.direction is SortDirection.DESC)

    def __str__(self) -> str:
        return f"{self.attribute_name} {self.direction.name}"
