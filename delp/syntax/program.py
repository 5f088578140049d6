"""
Defeasible logic program representation.

A program is a set of facts, strict rules and defeasible rules. It offers
the strict-knowledge services the dialectical machinery relies on: strict
closure, consistency and disagreement checks, grounding, and the
enumeration of all arguments.
"""

import itertools
from typing import (
    Any,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
)

from delp.errors import ProgramNotGroundError
from delp.logging.logger import get_delp_logger
from delp.syntax.argument import DelpArgument
from delp.syntax.literal import Literal
from delp.syntax.rules import DefeasibleRule, DelpFact, DelpRule, StrictRule

log = get_delp_logger("syntax")


class DefeasibleLogicProgram:
    """
    Collection of DeLP facts, strict rules and defeasible rules.

    Rules keep their insertion order and duplicates are ignored. Derived
    information (arguments, disagreement checks) is cached and the cache
    is dropped whenever a rule is added.

    Example:
        >>> program = DelpParser().parse_program('''
        ...     bird(tweety).
        ...     flies(X) -< bird(X).
        ... ''').ground()
        >>> program.get_arguments_with_conclusion(literal("flies(tweety)"))
    """

    def __init__(self, rules: Iterable[DelpRule] = (), name: str = "unnamed"):
        self.name = name
        self._rules: Dict[DelpRule, None] = {}
        self._arguments: Optional[FrozenSet[DelpArgument]] = None
        self._disagreement_cache: Dict[FrozenSet[Literal], bool] = {}
        self.add_all(rules)

    # ── Construction ───────────────────────────────────────────

    def add(self, rule: DelpRule) -> None:
        """Add a fact or rule to the program."""
        if not isinstance(rule, DelpRule):
            raise TypeError(f"Expected a DeLP rule, got {type(rule).__name__}")
        if rule not in self._rules:
            self._rules[rule] = None
            self._invalidate()

    def add_all(self, rules: Iterable[DelpRule]) -> None:
        for rule in rules:
            self.add(rule)

    def _invalidate(self) -> None:
        self._arguments = None
        self._disagreement_cache.clear()

    def __iter__(self) -> Iterator[DelpRule]:
        return iter(list(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule: object) -> bool:
        return rule in self._rules

    # ── Views ──────────────────────────────────────────────────

    @property
    def facts(self) -> Set[Literal]:
        """The literals asserted as facts."""
        return {rule.head for rule in self._rules if rule.is_fact()}

    @property
    def strict_rules(self) -> List[StrictRule]:
        return [rule for rule in self._rules if isinstance(rule, StrictRule)]

    @property
    def defeasible_rules(self) -> List[DefeasibleRule]:
        return [rule for rule in self._rules if isinstance(rule, DefeasibleRule)]

    def contains_fact(self, lit: Literal) -> bool:
        return DelpFact(lit) in self._rules

    def get_rules_with_head(self, lit: Literal) -> Set[DelpRule]:
        """All strict and defeasible rules (not facts) concluding ``lit``."""
        return {
            rule
            for rule in self._rules
            if (rule.is_strict() or rule.is_defeasible()) and rule.head == lit
        }

    def literals(self) -> Set[Literal]:
        """Every literal occurring in the program."""
        result: Set[Literal] = set()
        for rule in self._rules:
            result |= rule.literals()
        return result

    def predicates(self) -> Set[str]:
        return {lit.predicate for lit in self.literals()}

    def constants(self) -> Set[str]:
        result: Set[str] = set()
        for rule in self._rules:
            result |= rule.constants()
        return result

    # ── Grounding ──────────────────────────────────────────────

    def is_ground(self) -> bool:
        return all(rule.is_ground() for rule in self._rules)

    def ground(self, constants: Optional[Iterable[str]] = None) -> "DefeasibleLogicProgram":
        """
        Return the grounded version of this program.

        Every rule scheme is replaced by all its ground instances over
        ``constants`` (by default the constants occurring in the program).
        """
        if self.is_ground():
            return DefeasibleLogicProgram(self._rules, name=self.name)
        pool = set(constants) if constants is not None else self.constants()
        grounded = DefeasibleLogicProgram(name=self.name)
        for rule in self._rules:
            grounded.add_all(rule.ground_instances(pool))
        log.debug(
            f"Grounded program '{self.name}': {len(self)} rules -> {len(grounded)} "
            f"over {len(pool)} constants"
        )
        return grounded

    def _require_ground(self, operation: str) -> None:
        if not self.is_ground():
            raise ProgramNotGroundError(
                f"Program must be grounded first before computing {operation}"
            )

    # ── Strict knowledge ───────────────────────────────────────

    def get_strict_closure(
        self,
        literals: Iterable[Literal] = (),
        defeasible_rules: Iterable[DefeasibleRule] = (),
        use_facts: bool = True,
    ) -> Set[Literal]:
        """
        Compute the set of all strictly derivable literals.

        Args:
            literals: Additional literals treated as facts
            defeasible_rules: Defeasible rules read as strict rules here
            use_facts: Whether the program's own facts are used

        Returns:
            The closure of the program's strict rules over the given literals
        """
        self._require_ground("a strict closure")
        closure = set(literals)
        if use_facts:
            closure |= self.facts
        pending = list(self.strict_rules) + [
            rule.to_strict_rule() for rule in defeasible_rules
        ]
        modified = True
        while modified:
            modified = False
            remaining = []
            for rule in pending:
                if rule.is_applicable(closure):
                    closure.add(rule.head)
                    modified = True
                else:
                    remaining.append(rule)
            pending = remaining
        return closure

    @staticmethod
    def _is_contradictory(literals: Set[Literal]) -> bool:
        return any(lit.complement() in literals for lit in literals)

    def is_consistent(self, rules: Iterable[DefeasibleRule]) -> bool:
        """
        Check whether defeasible rules are consistent with the strict part.

        Returns False if facts, strict rules and the given rules (read as
        strict) derive two complementary literals.
        """
        closure = self.get_strict_closure((), rules, use_facts=True)
        return not self._is_contradictory(closure)

    def disagree(self, literals: Iterable[Literal]) -> bool:
        """
        Check whether literals disagree with respect to the strict part.

        True if facts and strict rules together with ``literals`` derive two
        complementary literals.
        """
        key = frozenset(literals)
        cached = self._disagreement_cache.get(key)
        if cached is None:
            cached = self._is_contradictory(self.get_strict_closure(key))
            self._disagreement_cache[key] = cached
        return cached

    # ── Arguments ──────────────────────────────────────────────

    def _derivations(
        self, lit: Literal, visiting: FrozenSet[Literal]
    ) -> Set[FrozenSet[DelpRule]]:
        """All sets of rules deriving ``lit`` from the facts, without cycles."""
        if self.contains_fact(lit):
            return {frozenset()}
        if lit in visiting:
            return set()
        visiting = visiting | {lit}
        results: Set[FrozenSet[DelpRule]] = set()
        for rule in self.get_rules_with_head(lit):
            partial: Set[FrozenSet[DelpRule]] = {frozenset([rule])}
            for premise in rule.body:
                sub = self._derivations(premise, visiting)
                partial = {p | s for p, s in itertools.product(partial, sub)}
                if not partial:
                    break
            results |= partial
        return results

    def get_arguments(self) -> FrozenSet[DelpArgument]:
        """
        Return the set of all arguments that can be built in this program.

        Every derivation of every literal yields a candidate whose support
        is the defeasible rules used; candidates inconsistent with the strict
        knowledge are dropped, as are candidates with a strictly smaller
        argument for the same conclusion.
        """
        self._require_ground("arguments")
        if self._arguments is not None:
            return self._arguments

        heads = {rule.head for rule in self._rules}
        candidates: Set[DelpArgument] = set()
        for head in heads:
            for derivation in self._derivations(head, frozenset()):
                support = frozenset(
                    rule for rule in derivation if isinstance(rule, DefeasibleRule)
                )
                if self.is_consistent(support):
                    candidates.add(DelpArgument(head, support))

        minimal = frozenset(
            arg
            for arg in candidates
            if not any(
                other.conclusion == arg.conclusion
                and other.is_strong_subargument_of(arg)
                for other in candidates
            )
        )
        log.debug(f"Program '{self.name}' yields {len(minimal)} arguments")
        self._arguments = minimal
        return minimal

    def get_arguments_with_conclusion(self, lit: Literal) -> Set[DelpArgument]:
        return {arg for arg in self.get_arguments() if arg.conclusion == lit}

    # ── Serialization ──────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """Convert program to dictionary for serialization."""
        return {
            "name": self.name,
            "facts": sorted(str(lit) for lit in self.facts),
            "strict_rules": [str(rule) for rule in self.strict_rules],
            "defeasible_rules": [str(rule) for rule in self.defeasible_rules],
        }

    def __str__(self) -> str:
        return "".join(f"{rule}\n" for rule in self._rules)

    def __repr__(self) -> str:
        return f"DefeasibleLogicProgram(name={self.name!r}, rules={len(self)})"
