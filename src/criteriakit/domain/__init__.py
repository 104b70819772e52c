"""Domain layer: criteria, combinators, ordering.

Criteria are pure: evaluate(items) -> matching items, original order.

Usage:
    from criteriakit.domain import Criteria, all_of, negate

    adults = Criteria.create(lambda p: p.age >= 18)
    flt = all_of(adults, negate(Criteria.create(lambda p: p.retired)))
    flt.evaluate(people)
"""

from criteriakit.domain.combinators import (
    AndCriteria,
    NotCriteria,
    OrCriteria,
    all_of,
    any_of,
    negate,
)
from criteriakit.domain.criteria import Criteria, PredicateCriteria
from criteriakit.domain.ordering import OrderBy, SortDirection, select_attribute
from criteriakit.domain.types import KeySelector, Predicate

__all__ = [
    "AndCriteria",
    "Criteria",
    "KeySelector",
    "NotCriteria",
    "OrCriteria",
    "OrderBy",
    "Predicate",
    "PredicateCriteria",
    "SortDirection",
    "all_of",
    "any_of",
    "negate",
    "select_attribute",
]
