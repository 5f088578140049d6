"""
Argument completions.

An argument only records the defeasible rules it uses. A completion adds
one concrete selection of strict rules which, together with the support
and the program facts, derives the conclusion. Generalized specificity
compares arguments through their completions.

The search below enumerates every such selection. It is exponential in the
number of alternative strict derivations of shared sub-literals.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Optional, Set, Tuple

from delp.errors import SearchBudgetExceededError
from delp.logging.decorators import track_reasoning_operation
from delp.logging.logger import get_delp_logger
from delp.syntax.argument import DelpArgument
from delp.syntax.literal import Literal
from delp.syntax.rules import DefeasibleRule, DelpFact, DelpRule, StrictRule

if TYPE_CHECKING:
    from delp.syntax.program import DefeasibleLogicProgram

log = get_delp_logger("semantics")

# (rules used so far, stack of literals still to be derived)
_Entry = Tuple[Tuple[DelpRule, ...], Tuple[Literal, ...]]


@dataclass(frozen=True)
class ArgumentCompletion:
    """
    An argument together with the strict rules of one derivation.

    ``completion.argument`` compares like the plain argument. The
    completion object itself also compares the strict rules, so a set of
    completions keeps each alternative derivation.
    """

    argument: DelpArgument
    completion: FrozenSet[StrictRule] = field(default_factory=frozenset)

    @property
    def conclusion(self) -> Literal:
        return self.argument.conclusion

    @property
    def support(self) -> FrozenSet[DefeasibleRule]:
        return self.argument.support

    @property
    def rules(self) -> FrozenSet[DelpRule]:
        """Support and completion together."""
        return frozenset(self.support) | frozenset(self.completion)

    def with_strict_rule(self, rule: StrictRule) -> "ArgumentCompletion":
        """Return a copy extended by one strict rule."""
        return ArgumentCompletion(self.argument, self.completion | {rule})

    def derives_conclusion(self, program: "DefeasibleLogicProgram") -> bool:
        """
        Check that facts, completion and support really derive the conclusion.

        Only the rules of this completion are used, not the remaining strict
        rules of the program.
        """
        from delp.syntax.program import DefeasibleLogicProgram

        restricted = DefeasibleLogicProgram(
            [DelpFact(lit) for lit in program.facts] + sorted(self.completion)
        )
        closure = restricted.get_strict_closure((), self.support, use_facts=True)
        return self.conclusion in closure

    def __str__(self) -> str:
        strict = ",".join(str(rule) for rule in sorted(self.completion))
        return f"{self.argument}+{{{strict}}}"

    @classmethod
    def get_completions(
        cls,
        argument: DelpArgument,
        program: "DefeasibleLogicProgram",
        max_completions: Optional[int] = None,
    ) -> Set["ArgumentCompletion"]:
        """
        Compute every completion of ``argument`` in ``program``.

        Args:
            argument: The argument to complete
            program: The (ground) program the argument is drawn from
            max_completions: Maximum number of partial completions taken
                from the worklist; None means unbounded

        Returns:
            The set of distinct completions; empty if no combination of
            rules derives the conclusion

        Raises:
            SearchBudgetExceededError: If ``max_completions`` is exceeded
        """
        return _search_completions(argument, program, max_completions)


@track_reasoning_operation("completion_search")
def _search_completions(
    argument: DelpArgument,
    program: "DefeasibleLogicProgram",
    max_completions: Optional[int],
) -> Set[ArgumentCompletion]:
    rules_by_head: Dict[Literal, List[DelpRule]] = defaultdict(list)
    for rule in sorted(set(argument.support) | set(program.strict_rules)):
        rules_by_head[rule.head].append(rule)

    conclusion = argument.conclusion
    worklist: List[_Entry] = []
    if program.contains_fact(conclusion):
        worklist.append(((), ()))
    else:
        for rule in rules_by_head.get(conclusion, ()):
            pending = tuple(lit for lit in sorted(rule.body) if lit != conclusion)
            worklist.append(((rule,), pending))

    results: Set[ArgumentCompletion] = set()
    explored = 0
    while worklist:
        rules_used, pending = worklist.pop()
        explored += 1
        if max_completions is not None and explored > max_completions:
            raise SearchBudgetExceededError(
                f"Completion search for {argument} explored more than "
                f"{max_completions} partial completions",
                explored=explored,
                limit=max_completions,
            )

        if not pending:
            candidate = ArgumentCompletion(argument)
            for rule in rules_used:
                if isinstance(rule, StrictRule):
                    candidate = candidate.with_strict_rule(rule)
            if candidate.derives_conclusion(program):
                results.add(candidate)
            else:
                log.debug(f"Discarding circular completion {candidate}")
            continue

        lit, rest = pending[-1], pending[:-1]
        if program.contains_fact(lit):
            worklist.append((rules_used, rest))
            continue

        # No rule for lit: the branch contributes nothing
        for rule in rules_by_head.get(lit, ()):
            used = rules_used + (rule,)
            concluded = {r.head for r in used}
            extended = list(rest)
            for premise in sorted(rule.body):
                if premise in concluded or premise in extended:
                    continue
                extended.append(premise)
            worklist.append((used, tuple(extended)))

    if not results:
        log.warning(f"No completion derives the conclusion of {argument}")
    log.debug(
        f"Found {len(results)} completions for {argument} after exploring {explored} entries"
    )
    return results
