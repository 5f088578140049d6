"""
DeLP arguments.

An argument is a minimal, consistent set of defeasible rules (its support)
which, together with the strict knowledge of a program, derives a
conclusion literal.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterable, Optional, Set

from delp.errors import DelpSyntaxError
from delp.syntax.literal import Literal
from delp.syntax.rules import DefeasibleRule

if TYPE_CHECKING:
    from delp.syntax.program import DefeasibleLogicProgram


@dataclass(frozen=True)
class DelpArgument:
    """
    A DeLP argument ``<support, conclusion>``.

    Identity is the pair (support, conclusion). Which strict rules were
    used to reach the conclusion is not part of the argument.
    """

    conclusion: Literal
    support: FrozenSet[DefeasibleRule] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.conclusion, Literal):
            raise DelpSyntaxError(
                f"The conclusion of an argument must be a literal, got {self.conclusion!r}"
            )
        if not isinstance(self.support, frozenset):
            object.__setattr__(self, "support", frozenset(self.support))

    @classmethod
    def of(cls, conclusion: Literal, support: Iterable[DefeasibleRule] = ()) -> "DelpArgument":
        return cls(conclusion, frozenset(support))

    def is_subargument_of(self, other: "DelpArgument") -> bool:
        """True iff this argument's support is contained in ``other``'s support."""
        return self.support <= other.support

    def is_strong_subargument_of(self, other: "DelpArgument") -> bool:
        """True iff this argument's support is strictly contained in ``other``'s."""
        return self.support < other.support

    def get_conclusion_set(self) -> Set[Literal]:
        """The conclusion together with the heads of all support rules."""
        return {self.conclusion} | {rule.conclusion for rule in self.support}

    def get_attack_opportunities(
        self, program: "DefeasibleLogicProgram"
    ) -> Set[Literal]:
        """
        Literals that an attacking argument may conclude.

        These are all literals of the program that disagree with some
        member of the conclusion set, which always includes the complement
        of every member.
        """
        conclusions = self.get_conclusion_set()
        opportunities = {lit.complement() for lit in conclusions}
        for candidate in program.literals():
            if candidate in opportunities or candidate in conclusions:
                continue
            if any(program.disagree({candidate, lit}) for lit in conclusions):
                opportunities.add(candidate)
        return opportunities

    def get_disagreement_subargument(
        self, lit: Literal, program: "DefeasibleLogicProgram"
    ) -> Optional["DelpArgument"]:
        """
        Return the subargument of this argument that disagrees with ``lit``.

        The own conclusion is tried first, then the other members of the
        conclusion set in sorted order. The subargument is the smallest
        argument of the program for that literal whose support lies inside
        this argument's support. None if no member disagrees with ``lit``.
        """
        ordered = [self.conclusion] + sorted(
            self.get_conclusion_set() - {self.conclusion}
        )
        for candidate in ordered:
            if not program.disagree({lit, candidate}):
                continue
            if candidate == self.conclusion:
                return self
            subarguments = [
                arg
                for arg in program.get_arguments_with_conclusion(candidate)
                if arg.is_subargument_of(self)
            ]
            if subarguments:
                return min(subarguments, key=lambda a: (len(a.support), str(a)))
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "conclusion": str(self.conclusion),
            "support": sorted(str(rule) for rule in self.support),
        }

    def __str__(self) -> str:
        rules = ",".join(str(rule) for rule in sorted(self.support))
        return f"<{{{rules}}},{self.conclusion}>"

    def __repr__(self) -> str:
        return f"DelpArgument({self})"

    def __lt__(self, other: "DelpArgument") -> bool:
        if not isinstance(other, DelpArgument):
            return NotImplemented
        return str(self) < str(other)
