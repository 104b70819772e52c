"""criteriakit - composable in-memory query criteria with fluent building and stable ordering."""

__version__ = "0.1.0"

from criteriakit.application.builder import BuiltCriteria, CriteriaBuilder
from criteriakit.domain.combinators import (
    AndCriteria,
    NotCriteria,
    OrCriteria,
    all_of,
    any_of,
    negate,
)
from criteriakit.domain.criteria import Criteria, PredicateCriteria
from criteriakit.domain.ordering import OrderBy, SortDirection
from criteriakit.presentation.tree import TreeConfig, TreeRenderer

__all__ = [
    "AndCriteria",
    "BuiltCriteria",
    "Criteria",
    "CriteriaBuilder",
    "NotCriteria",
    "OrCriteria",
    "OrderBy",
    "PredicateCriteria",
    "SortDirection",
    "TreeConfig",
    "TreeRenderer",
    "__version__",
    "all_of",
    "any_of",
    "negate",
]
