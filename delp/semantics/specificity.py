"""
Generalized specificity.

An argument is more specific than another if every non-trivial activation
set of the first also activates the second, but not vice versa. Informally,
the argument that relies on more specific information wins: the penguin
argument against flying beats the bird argument for flying because being a
penguin strictly implies being a bird.
"""

from collections import defaultdict
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from delp.logging.decorators import track_reasoning_operation
from delp.logging.logger import get_delp_logger
from delp.semantics.comparison import ComparisonCriterion, ComparisonResult
from delp.semantics.completion import ArgumentCompletion
from delp.syntax.argument import DelpArgument
from delp.syntax.literal import Literal, format_literals
from delp.syntax.rules import DelpRule

if TYPE_CHECKING:
    from delp.syntax.program import DefeasibleLogicProgram

log = get_delp_logger("semantics")

ActivationSet = FrozenSet[Literal]

# (activation set, pending literals, expanded literals, non-trivial)
_Branch = Tuple[ActivationSet, Tuple[Literal, ...], FrozenSet[Literal], bool]


class GeneralizedSpecificity(ComparisonCriterion):
    """
    Specificity comparison based on activation sets of argument completions.

    Args:
        max_completions: Budget passed on to the completion search
    """

    name = "genspec"

    def __init__(self, max_completions: Optional[int] = None):
        self.max_completions = max_completions

    @staticmethod
    def get_activation_sets(completion: ArgumentCompletion) -> Set[ActivationSet]:
        """
        Compute the non-trivial activation sets of one completion.

        Depth-first search from the conclusion: every pending literal is
        either consumed into the activation set or expanded with a rule of
        the completion or the support. A branch becomes non-trivial once a
        defeasible rule is used; only non-trivial branches without pending
        literals contribute their activation set.
        """
        rules_by_head: Dict[Literal, List[DelpRule]] = defaultdict(list)
        for rule in sorted(completion.rules):
            rules_by_head[rule.head].append(rule)

        results: Set[ActivationSet] = set()
        stack: List[_Branch] = [
            (frozenset(), (completion.conclusion,), frozenset(), False)
        ]
        while stack:
            activation, pending, expanded, non_trivial = stack.pop()
            if not pending:
                if non_trivial:
                    results.add(activation)
                continue

            lit, rest = pending[-1], pending[:-1]
            stack.append((activation | {lit}, rest, expanded, non_trivial))

            if lit in expanded:
                continue
            for rule in rules_by_head.get(lit, ()):
                now_expanded = expanded | {lit}
                extended = list(rest)
                for premise in sorted(rule.body):
                    if premise in now_expanded or premise in activation or premise in extended:
                        continue
                    extended.append(premise)
                stack.append(
                    (
                        activation,
                        tuple(extended),
                        now_expanded,
                        non_trivial or rule.is_defeasible(),
                    )
                )
        return results

    def get_all_activation_sets(
        self, argument: DelpArgument, program: "DefeasibleLogicProgram"
    ) -> Set[ActivationSet]:
        """Union of the activation sets of every completion of ``argument``."""
        result: Set[ActivationSet] = set()
        completions = ArgumentCompletion.get_completions(
            argument, program, max_completions=self.max_completions
        )
        for completion in completions:
            result |= self.get_activation_sets(completion)
        return result

    @staticmethod
    def is_activated(
        argument: DelpArgument,
        activation_set: Iterable[Literal],
        program: "DefeasibleLogicProgram",
    ) -> bool:
        """
        True iff the activation set, read with the argument's support and the
        program's strict rules but without the facts, derives the conclusion.
        """
        closure = program.get_strict_closure(
            activation_set, argument.support, use_facts=False
        )
        return argument.conclusion in closure

    def act_set_test(
        self,
        activation_sets: Iterable[ActivationSet],
        argument: DelpArgument,
        program: "DefeasibleLogicProgram",
    ) -> bool:
        """True iff every activation set activates ``argument``."""
        for activation_set in activation_sets:
            if not self.is_activated(argument, activation_set, program):
                log.trace(
                    f"Activation set {{{format_literals(activation_set)}}} "
                    f"does not activate {argument}"
                )
                return False
        return True

    @track_reasoning_operation("specificity_compare")
    def compare(
        self,
        argument1: DelpArgument,
        argument2: DelpArgument,
        program: "DefeasibleLogicProgram",
    ) -> ComparisonResult:
        sets1 = self.get_all_activation_sets(argument1, program)
        sets2 = self.get_all_activation_sets(argument2, program)

        test1 = self.act_set_test(sets1, argument2, program)
        test2 = self.act_set_test(sets2, argument1, program)

        if test1 and not test2:
            result = ComparisonResult.IS_BETTER
        elif test2 and not test1:
            result = ComparisonResult.IS_WORSE
        else:
            result = ComparisonResult.NOT_COMPARABLE
        log.debug(f"{argument1} vs {argument2}: {result.name}")
        return result

    def __repr__(self) -> str:
        return f"GeneralizedSpecificity(max_completions={self.max_completions})"
