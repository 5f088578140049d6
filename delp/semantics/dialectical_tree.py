"""
Dialectical trees.

A dialectical tree is rooted in an argument; the children of a node are the
defeaters of its argument that keep the argumentation line from the root
acceptable. A node is UNDEFEATED iff none of its children is UNDEFEATED.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Set

from delp.errors import DelpConstructionError, DelpPreconditionError
from delp.logging.logger import get_delp_logger
from delp.semantics.comparison import (
    ComparisonCriterion,
    ComparisonResult,
    resolve_criterion,
)
from delp.syntax.argument import DelpArgument

if TYPE_CHECKING:
    from delp.syntax.program import DefeasibleLogicProgram

log = get_delp_logger("semantics")


class Mark(Enum):
    """Marking of a dialectical tree node."""

    DEFEATED = "D"
    UNDEFEATED = "U"

    def __str__(self) -> str:
        return self.value


class DialecticalTree:
    """
    A node of a dialectical tree.

    Nodes compare by identity: two defeater nodes may carry equal arguments
    under different parents.

    Args:
        argument: The argument of this node
        parent: The parent node; None for a root
    """

    def __init__(
        self, argument: DelpArgument, parent: Optional["DialecticalTree"] = None
    ):
        if argument is None:
            raise DelpConstructionError(
                "Cannot instantiate dialectical tree with None argument"
            )
        self.argument = argument
        self.parent = parent
        self.children: Set["DialecticalTree"] = set()

    @property
    def depth(self) -> int:
        """Number of edges between this node and the root."""
        return 0 if self.parent is None else self.parent.depth + 1

    def is_root(self) -> bool:
        return self.parent is None

    def is_leaf(self) -> bool:
        return not self.children

    def get_argumentation_line(self) -> List[DelpArgument]:
        """The arguments on the path from the root to this node, root first."""
        line: List[DelpArgument] = []
        node: Optional[DialecticalTree] = self
        while node is not None:
            line.append(node.argument)
            node = node.parent
        line.reverse()
        return line

    def find_defeaters(
        self,
        program: "DefeasibleLogicProgram",
        criterion: Optional[ComparisonCriterion] = None,
    ) -> Set["DialecticalTree"]:
        """
        Build child nodes for every acceptable defeater without attaching them.

        Candidates are all arguments of the program concluding one of the
        attack opportunities of this node's argument.
        """
        if program is None:
            raise DelpPreconditionError("Cannot compute defeaters without a program")

        attacks: Set[DelpArgument] = set()
        for lit in sorted(self.argument.get_attack_opportunities(program)):
            attacks |= program.get_arguments_with_conclusion(lit)

        defeaters = {
            DialecticalTree(attack, parent=self)
            for attack in sorted(attacks)
            if self.is_acceptable(attack, program, criterion)
        }
        log.debug(
            f"{len(defeaters)} of {len(attacks)} attacks accepted at depth {self.depth}"
        )
        return defeaters

    def get_defeaters(
        self,
        program: "DefeasibleLogicProgram",
        criterion: Optional[ComparisonCriterion] = None,
    ) -> Set["DialecticalTree"]:
        """
        Compute the defeater nodes and make them the children of this node.

        Any previous children are replaced.

        Raises:
            DelpPreconditionError: If ``program`` is None
        """
        self.children = self.find_defeaters(program, criterion)
        return self.children

    def is_acceptable(
        self,
        candidate: DelpArgument,
        program: "DefeasibleLogicProgram",
        criterion: Optional[ComparisonCriterion] = None,
    ) -> bool:
        """
        Check whether extending the argumentation line with ``candidate``
        keeps the line acceptable.

        The tests run in order: subargument, concordance, blocking attack
        and, for lines longer than one, proper attack.
        """
        line = self.get_argumentation_line()

        if any(candidate.is_subargument_of(arg) for arg in line):
            return False

        # Candidate joins the arguments at even distance behind the last one
        rules = set(candidate.support)
        for i in range(len(line) - 2, -1, -2):
            rules |= line[i].support
        if not program.is_consistent(rules):
            return False

        criterion = resolve_criterion(criterion)
        disagreement = line[-1].get_disagreement_subargument(
            candidate.conclusion, program
        )
        if disagreement is None:
            return False
        if criterion.compare(candidate, disagreement, program) == ComparisonResult.IS_WORSE:
            return False

        if len(line) > 1:
            last = line[-1]
            attacked = line[-2].get_disagreement_subargument(last.conclusion, program)
            if (
                attacked is not None
                and criterion.compare(last, attacked, program)
                == ComparisonResult.NOT_COMPARABLE
                and criterion.compare(candidate, disagreement, program)
                != ComparisonResult.IS_BETTER
            ):
                return False
        return True

    def get_marking(self) -> Mark:
        for child in self.children:
            if child.get_marking() == Mark.UNDEFEATED:
                return Mark.DEFEATED
        return Mark.UNDEFEATED

    def iter_nodes(self) -> Iterator["DialecticalTree"]:
        """Pre-order traversal; children in rendering order."""
        yield self
        for child in self._sorted_children():
            yield from child.iter_nodes()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "argument": self.argument.to_dict(),
            "mark": str(self.get_marking()),
            "children": [child.to_dict() for child in self._sorted_children()],
        }

    def _sorted_children(self) -> List["DialecticalTree"]:
        return sorted(self.children, key=str)

    def __str__(self) -> str:
        if not self.children:
            return f"[{self.argument}]"
        rendered = ", ".join(str(child) for child in self._sorted_children())
        return f"[{self.argument} - {rendered}]"

    def __repr__(self) -> str:
        return f"DialecticalTree({self.argument}, depth={self.depth})"
