"""
Comparison criteria between DeLP arguments.

A criterion decides whether one argument is preferred to another within a
program. The outcome is a tagged relation, not a number: NOT_COMPARABLE is
an ordinary answer.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional

from delp.errors import UnknownCriterionError
from delp.syntax.argument import DelpArgument

if TYPE_CHECKING:
    from delp.syntax.program import DefeasibleLogicProgram


class ComparisonResult(Enum):
    """Outcome of comparing argument1 with argument2."""

    IS_BETTER = "is_better"
    IS_WORSE = "is_worse"
    IS_EQUAL = "is_equal"
    NOT_COMPARABLE = "not_comparable"

    def inverse(self) -> "ComparisonResult":
        """The result of the same comparison with the arguments swapped."""
        if self is ComparisonResult.IS_BETTER:
            return ComparisonResult.IS_WORSE
        if self is ComparisonResult.IS_WORSE:
            return ComparisonResult.IS_BETTER
        return self


class ComparisonCriterion(ABC):
    """Strategy for comparing two arguments in the context of a program."""

    name: str = "abstract"

    @abstractmethod
    def compare(
        self,
        argument1: DelpArgument,
        argument2: DelpArgument,
        program: "DefeasibleLogicProgram",
    ) -> ComparisonResult:
        """
        Compare ``argument1`` with ``argument2``.

        Returns:
            IS_BETTER if argument1 is preferred, IS_WORSE if argument2 is
            preferred, IS_EQUAL or NOT_COMPARABLE otherwise
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EmptyCriterion(ComparisonCriterion):
    """
    The neutral criterion: no argument is ever preferred.

    Used wherever no comparison criterion is given.
    """

    name = "empty"

    def compare(
        self,
        argument1: DelpArgument,
        argument2: DelpArgument,
        program: "DefeasibleLogicProgram",
    ) -> ComparisonResult:
        return ComparisonResult.NOT_COMPARABLE


def _generalized_specificity() -> ComparisonCriterion:
    from delp.semantics.specificity import GeneralizedSpecificity

    return GeneralizedSpecificity()


CRITERIA: Dict[str, Callable[[], ComparisonCriterion]] = {
    "empty": EmptyCriterion,
    "genspec": _generalized_specificity,
}


def get_criterion(name: Optional[str]) -> ComparisonCriterion:
    """
    Build a criterion from its name ("empty" or "genspec").

    ``None`` yields the EmptyCriterion.
    """
    if name is None:
        return EmptyCriterion()
    try:
        factory = CRITERIA[name.strip().lower()]
    except KeyError:
        raise UnknownCriterionError(
            f"Unknown comparison criterion '{name}', expected one of: "
            f"{', '.join(sorted(CRITERIA))}",
            name=name,
        ) from None
    return factory()


def resolve_criterion(criterion: Optional[ComparisonCriterion]) -> ComparisonCriterion:
    """Substitute the EmptyCriterion for a missing criterion."""
    return criterion if criterion is not None else EmptyCriterion()
