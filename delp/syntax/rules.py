"""
DeLP rule representation.

Provides immutable wrappers for the three kinds of program elements:
facts (``bird(tweety).``), strict rules (``bird(X) <- penguin(X).``) and
defeasible rules (``flies(X) -< bird(X).``).
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, List, Set

from delp.errors import DelpSyntaxError
from delp.syntax.literal import Literal, format_literals


@dataclass(frozen=True)
class DelpRule:
    """
    Base class of facts, strict rules and defeasible rules.

    The head is a single literal, the body a set of literals. Rules are
    value objects: two rules are equal iff they have the same kind, head
    and body.
    """

    head: Literal
    body: FrozenSet[Literal] = field(default_factory=frozenset)

    # Rule arrow used when rendering; facts have none
    ARROW: ClassVar[str] = ""
    KIND: ClassVar[str] = "rule"

    def __post_init__(self) -> None:
        if not isinstance(self.head, Literal):
            raise DelpSyntaxError(
                f"Heads of DeLP rules need to consist of a single literal, got {self.head!r}"
            )
        if not isinstance(self.body, frozenset):
            object.__setattr__(self, "body", frozenset(self.body))
        for lit in self.body:
            if not isinstance(lit, Literal):
                raise DelpSyntaxError(
                    f"Body elements of DeLP rules need to consist of literals, got {lit!r}"
                )

    @property
    def conclusion(self) -> Literal:
        return self.head

    @property
    def premise(self) -> FrozenSet[Literal]:
        return self.body

    def is_fact(self) -> bool:
        return False

    def is_strict(self) -> bool:
        return False

    def is_defeasible(self) -> bool:
        return False

    def is_applicable(self, literals: Iterable[Literal]) -> bool:
        """A rule is applicable iff its whole body is among ``literals``."""
        available = literals if isinstance(literals, (set, frozenset)) else set(literals)
        return self.body <= available

    def is_ground(self) -> bool:
        return self.head.is_ground() and all(lit.is_ground() for lit in self.body)

    def literals(self) -> Set[Literal]:
        return {self.head, *self.body}

    def variables(self) -> Set[str]:
        result = set(self.head.variables())
        for lit in self.body:
            result |= lit.variables()
        return result

    def constants(self) -> Set[str]:
        result = set(self.head.constants())
        for lit in self.body:
            result |= lit.constants()
        return result

    def substitute(self, mapping: Dict[str, str]) -> "DelpRule":
        return type(self)(
            self.head.substitute(mapping),
            frozenset(lit.substitute(mapping) for lit in self.body),
        )

    def ground_instances(self, constants: Iterable[str]) -> List["DelpRule"]:
        """
        Return every ground instance of this rule.

        Each variable is replaced by each constant in every possible way.
        A rule with variables but no constants has no ground instance.
        """
        variables = sorted(self.variables())
        if not variables:
            return [self]
        pool = sorted(set(constants))
        instances = []
        for values in itertools.product(pool, repeat=len(variables)):
            instances.append(self.substitute(dict(zip(variables, values))))
        return instances

    def to_dict(self) -> Dict[str, Any]:
        """Convert rule to dictionary for serialization."""
        return {
            "kind": self.KIND,
            "head": str(self.head),
            "body": sorted(str(lit) for lit in self.body),
        }

    def __str__(self) -> str:
        return f"{self.head} {self.ARROW} {format_literals(self.body)}."

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def __lt__(self, other: "DelpRule") -> bool:
        if not isinstance(other, DelpRule):
            return NotImplemented
        return str(self) < str(other)


@dataclass(frozen=True, repr=False)
class DelpFact(DelpRule):
    """A fact: a ground literal that holds unconditionally."""

    KIND: ClassVar[str] = "fact"

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.body:
            raise DelpSyntaxError(f"Facts cannot have a body: {self.head}")

    def is_fact(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{self.head}."


@dataclass(frozen=True, repr=False)
class StrictRule(DelpRule):
    """A strict rule ``head <- body``; its conclusion is indisputable."""

    ARROW: ClassVar[str] = "<-"
    KIND: ClassVar[str] = "strict"

    def is_strict(self) -> bool:
        return True


@dataclass(frozen=True, repr=False)
class DefeasibleRule(DelpRule):
    """A defeasible rule ``head -< body``; its conclusion is tentative."""

    ARROW: ClassVar[str] = "-<"
    KIND: ClassVar[str] = "defeasible"

    def is_defeasible(self) -> bool:
        return True

    def to_strict_rule(self) -> StrictRule:
        """Read this rule as if it were strict (used for closures)."""
        return StrictRule(self.head, self.body)


def make_rule(kind: str, head: Literal, body: Iterable[Literal] = ()) -> DelpRule:
    """Build a rule of the given kind ("fact", "strict" or "defeasible")."""
    classes = {cls.KIND: cls for cls in (DelpFact, StrictRule, DefeasibleRule)}
    try:
        rule_class = classes[kind]
    except KeyError:
        raise DelpSyntaxError(f"Unknown rule kind: '{kind}'") from None
    return rule_class(head, frozenset(body))
