"""Application layer: criteria builder."""

from criteriakit.application.builder import BuiltCriteria, CriteriaBuilder

__all__ = ["BuiltCriteria", "CriteriaBuilder"]
