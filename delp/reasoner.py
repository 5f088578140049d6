"""
Warrant reasoning for defeasible logic programs.

This module provides the DelpReasoner class which answers queries by
building one dialectical tree per argument for the queried literal and
marking it.
"""

import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Deque, Dict, List, Optional, Set, Union

from delp.config import ReasonerConfig
from delp.logging.decorators import performance_monitor
from delp.logging.logger import get_delp_logger, log_query_answer
from delp.semantics.comparison import ComparisonCriterion, get_criterion, resolve_criterion
from delp.semantics.dialectical_tree import DialecticalTree, Mark
from delp.semantics.specificity import GeneralizedSpecificity
from delp.syntax.argument import DelpArgument
from delp.syntax.literal import Literal
from delp.syntax.parser import DelpParser
from delp.syntax.program import DefeasibleLogicProgram

log = get_delp_logger("reasoner")


class AnswerType(Enum):
    """Possible answers to a warrant query."""

    YES = "YES"  # some argument for the query is undefeated
    NO = "NO"  # the complement is warranted
    UNDECIDED = "UNDECIDED"  # neither the query nor its complement is warranted
    UNKNOWN = "UNKNOWN"  # the predicate does not occur in the program


@dataclass
class DelpAnswer:
    """Answer to a warrant query together with the trees that decided it."""

    answer_type: AnswerType
    query: Literal
    trees: List[DialecticalTree] = field(default_factory=list)  # one per argument
    elapsed_ms: float = 0.0
    explanation: str = ""

    @property
    def text(self) -> str:
        return self.answer_type.value

    @property
    def warranted(self) -> bool:
        return self.answer_type == AnswerType.YES

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/reporting."""
        return {
            "query": str(self.query),
            "answer": self.text,
            "explanation": self.explanation,
            "elapsed_ms": self.elapsed_ms,
            "trees": [tree.to_dict() for tree in self.trees],
        }

    def __str__(self) -> str:
        return f"{self.query}? {self.text}"


class DelpReasoner:
    """
    Answers warrant queries over a defeasible logic program.

    Args:
        criterion: Comparison criterion or its name ("empty", "genspec");
            None means the EmptyCriterion
        max_tree_depth: Nodes at this depth are not expanded; None = unbounded
        max_completions: Completion search budget for generalized specificity
    """

    def __init__(
        self,
        criterion: Union[ComparisonCriterion, str, None] = None,
        max_tree_depth: Optional[int] = None,
        max_completions: Optional[int] = None,
    ):
        if isinstance(criterion, str):
            criterion = get_criterion(criterion)
        if isinstance(criterion, GeneralizedSpecificity) and max_completions is not None:
            # Shared criterion instances keep their own budget
            criterion = GeneralizedSpecificity(max_completions=max_completions)
        self.criterion = resolve_criterion(criterion)
        self.max_tree_depth = max_tree_depth
        self.max_completions = max_completions
        self._parser = DelpParser()

    @classmethod
    def from_config(cls, reasoner_config: ReasonerConfig) -> "DelpReasoner":
        """Create a reasoner from a ReasonerConfig."""
        return cls(
            criterion=reasoner_config.criterion,
            max_tree_depth=reasoner_config.max_tree_depth,
            max_completions=reasoner_config.max_completions,
        )

    def build_tree(
        self, argument: DelpArgument, program: DefeasibleLogicProgram
    ) -> DialecticalTree:
        """
        Build the complete dialectical tree rooted in ``argument``.

        Nodes are expanded breadth-first. ``program`` must be ground.
        """
        root = DialecticalTree(argument)
        frontier: Deque[DialecticalTree] = deque([root])
        truncated = 0
        while frontier:
            node = frontier.popleft()
            if self.max_tree_depth is not None and node.depth >= self.max_tree_depth:
                truncated += 1
                continue
            frontier.extend(node.get_defeaters(program, self.criterion))

        if truncated:
            log.warning(
                f"Dialectical tree for {argument} truncated: {truncated} nodes at "
                f"depth {self.max_tree_depth} were not expanded"
            )
        return root

    def _ground(self, program: DefeasibleLogicProgram) -> DefeasibleLogicProgram:
        return program if program.is_ground() else program.ground()

    def is_warranted(self, lit: Literal, program: DefeasibleLogicProgram) -> bool:
        """True iff some argument for ``lit`` has an UNDEFEATED tree."""
        return any(
            self.build_tree(argument, program).get_marking() == Mark.UNDEFEATED
            for argument in sorted(program.get_arguments_with_conclusion(lit))
        )

    @performance_monitor(threshold_ms=1000.0, component="reasoner")
    def query(
        self, program: DefeasibleLogicProgram, query: Union[Literal, str]
    ) -> DelpAnswer:
        """
        Answer whether ``query`` is warranted in ``program``.

        Args:
            program: The program; grounded first if it has variables
            query: A ground literal or its DeLP text

        Returns:
            DelpAnswer with YES, NO, UNDECIDED or UNKNOWN
        """
        start = time.perf_counter()
        if isinstance(query, str):
            query = self._parser.parse_literal(query)
        ground = self._ground(program)

        trees = [
            self.build_tree(argument, ground)
            for argument in sorted(ground.get_arguments_with_conclusion(query))
        ]
        undefeated = [tree for tree in trees if tree.get_marking() == Mark.UNDEFEATED]

        if undefeated:
            answer_type = AnswerType.YES
            explanation = f"{query} is warranted by {undefeated[0].argument}"
        elif self.is_warranted(query.complement(), ground):
            answer_type = AnswerType.NO
            explanation = f"the complement {query.complement()} is warranted"
        elif query.predicate in ground.predicates():
            answer_type = AnswerType.UNDECIDED
            explanation = (
                f"{len(trees)} arguments for {query}, none undefeated, "
                f"and {query.complement()} is not warranted"
            )
        else:
            answer_type = AnswerType.UNKNOWN
            explanation = f"predicate '{query.predicate}' does not occur in the program"

        answer = DelpAnswer(
            answer_type=answer_type,
            query=query,
            trees=trees,
            elapsed_ms=(time.perf_counter() - start) * 1000,
            explanation=explanation,
        )
        log_query_answer(
            log, str(query), answer.text, elapsed_ms=answer.elapsed_ms, trees=len(trees)
        )
        return answer

    def warranted_literals(self, program: DefeasibleLogicProgram) -> Set[Literal]:
        """All literals with at least one UNDEFEATED dialectical tree."""
        ground = self._ground(program)
        conclusions = {argument.conclusion for argument in ground.get_arguments()}
        return {lit for lit in conclusions if self.is_warranted(lit, ground)}

    def __repr__(self) -> str:
        return (
            f"DelpReasoner(criterion={self.criterion!r}, "
            f"max_tree_depth={self.max_tree_depth}, "
            f"max_completions={self.max_completions})"
        )
