"""
First-order literals for defeasible logic programs.

A literal is an atom ``p(t1, ..., tn)`` or its strong negation
``~p(t1, ..., tn)``. Terms are plain strings; a term that starts with an
upper-case letter or an underscore is a variable.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Set, Tuple

from delp.errors import DelpSyntaxError

NEGATION_SYMBOL = "~"


def is_variable(term: str) -> bool:
    """Check whether a term is a variable (``X``, ``Who``, ``_tmp``)."""
    return bool(term) and (term[0].isupper() or term[0] == "_")


@dataclass(frozen=True, order=True)
class Literal:
    """
    Immutable, hashable first-order literal.

    Ordering is only used to render sets of literals deterministically.
    """

    predicate: str
    arguments: Tuple[str, ...] = ()
    negated: bool = False

    def __post_init__(self) -> None:
        if not self.predicate or not (
            self.predicate[0].isalpha() or self.predicate[0] == "_"
        ):
            raise DelpSyntaxError(f"Invalid predicate name: '{self.predicate}'")
        if not isinstance(self.arguments, tuple):
            object.__setattr__(self, "arguments", tuple(self.arguments))
        for term in self.arguments:
            if not isinstance(term, str) or not term:
                raise DelpSyntaxError(
                    f"Invalid term {term!r} in literal '{self.predicate}'"
                )

    @property
    def arity(self) -> int:
        return len(self.arguments)

    @property
    def atom(self) -> "Literal":
        """The positive atom underlying this literal."""
        if not self.negated:
            return self
        return Literal(self.predicate, self.arguments, False)

    def complement(self) -> "Literal":
        """Return the complementary literal (``~~p`` is ``p``)."""
        return Literal(self.predicate, self.arguments, not self.negated)

    def is_ground(self) -> bool:
        return not any(is_variable(t) for t in self.arguments)

    def variables(self) -> Set[str]:
        return {t for t in self.arguments if is_variable(t)}

    def constants(self) -> Set[str]:
        return {t for t in self.arguments if not is_variable(t)}

    def substitute(self, mapping: Mapping[str, str]) -> "Literal":
        """Replace variables according to ``mapping``; unmapped terms stay."""
        if not mapping:
            return self
        return Literal(
            self.predicate,
            tuple(mapping.get(t, t) for t in self.arguments),
            self.negated,
        )

    def __str__(self) -> str:
        prefix = NEGATION_SYMBOL if self.negated else ""
        if not self.arguments:
            return f"{prefix}{self.predicate}"
        return f"{prefix}{self.predicate}({','.join(self.arguments)})"

    def __repr__(self) -> str:
        return f"Literal({self})"


def literal(text: str) -> Literal:
    """
    Build a literal from its textual form, e.g. ``literal("~flies(tweety)")``.

    Convenience wrapper around the program parser.
    """
    from delp.syntax.parser import DelpParser

    return DelpParser().parse_literal(text)


def format_literals(literals: Iterable[Literal]) -> str:
    """Render literals sorted and comma separated."""
    return ",".join(str(lit) for lit in sorted(literals))


def collect_constants(literals: Iterable[Literal]) -> Set[str]:
    constants: Set[str] = set()
    for lit in literals:
        constants |= lit.constants()
    return constants