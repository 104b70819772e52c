"""Presentation layer: rendering criteria for humans."""

from criteriakit.presentation.tree import TreeConfig, TreeRenderer

__all__ = ["TreeConfig", "TreeRenderer"]
