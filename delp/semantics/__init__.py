"""
Dialectical semantics of DeLP.

Argument completions, comparison criteria and dialectical trees.
"""

from .comparison import (
    CRITERIA,
    ComparisonCriterion,
    ComparisonResult,
    EmptyCriterion,
    get_criterion,
    resolve_criterion,
)
from .completion import ArgumentCompletion
from .specificity import GeneralizedSpecificity
from .dialectical_tree import DialecticalTree, Mark

__all__ = [
    "ArgumentCompletion",
    "ComparisonCriterion",
    "ComparisonResult",
    "CRITERIA",
    "EmptyCriterion",
    "GeneralizedSpecificity",
    "get_criterion",
    "resolve_criterion",
    "DialecticalTree",
    "Mark",
]
