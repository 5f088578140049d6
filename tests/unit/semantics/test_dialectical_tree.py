"""
Unit tests for dialectical trees.

Tests for:
- Node construction and argumentation lines
- Defeater computation and acceptability tests
- Marking and rendering
"""

import pytest

from delp.errors import DelpConstructionError, DelpPreconditionError
from delp.semantics.comparison import EmptyCriterion
from delp.semantics.dialectical_tree import DialecticalTree, Mark
from delp.semantics.specificity import GeneralizedSpecificity
from delp.syntax.argument import DelpArgument
from delp.syntax.literal import literal
from delp.syntax.rules import DefeasibleRule

GENSPEC = GeneralizedSpecificity()

# x and y together are strictly contradictory
CONCORDANCE = """
p.
c <- p.
~c <- x, y.
x -< p.
y -< p.
"""

NIXON_BOTH = """
quaker(nixon).
republican(nixon).
pacifist(X) -< quaker(X).
~pacifist(X) -< republican(X).
pacifist(X) -< quaker(X), republican(X).
"""


def _defeasible(head: str, *body: str) -> DefeasibleRule:
    return DefeasibleRule(literal(head), {literal(b) for b in body})


class TestMark:
    """Tests for the Mark enum."""

    def test_str_is_first_letter(self):
        """Test the one-letter rendering of marks."""
        assert str(Mark.DEFEATED) == "D"
        assert str(Mark.UNDEFEATED) == "U"


class TestNodeStructure:
    """Tests for construction and tree navigation."""

    def test_none_argument_rejected(self):
        """Test that a node needs an argument."""
        with pytest.raises(DelpConstructionError):
            DialecticalTree(None)

    def test_construction_error_is_value_error(self):
        """Test that the construction error is also a ValueError."""
        with pytest.raises(ValueError):
            DialecticalTree(None)

    def test_root(self, birds, argument_for):
        """Test a freshly created root node."""
        argument = argument_for(birds, "flies(tweety)")
        root = DialecticalTree(argument)
        assert root.is_root()
        assert root.is_leaf()
        assert root.depth == 0
        assert root.get_argumentation_line() == [argument]
        assert root.get_marking() == Mark.UNDEFEATED
        assert str(root) == "[<{flies(tweety) -< bird(tweety).},flies(tweety)>]"

    def test_argumentation_line_is_root_first(self, birds, argument_for):
        """Test that the argumentation line runs from the root down."""
        flies = argument_for(birds, "flies(tweety)")
        not_flies = argument_for(birds, "~flies(tweety)")
        root = DialecticalTree(flies)
        child = DialecticalTree(not_flies, parent=root)
        assert child.get_argumentation_line() == [flies, not_flies]
        assert child.depth == 1
        assert not child.is_root()


class TestDefeaters:
    """Tests for find_defeaters and get_defeaters."""

    def test_program_is_required(self, birds, argument_for):
        """Test that expansion without a program raises."""
        root = DialecticalTree(argument_for(birds, "flies(tweety)"))
        with pytest.raises(DelpPreconditionError):
            root.get_defeaters(None, GENSPEC)

    def test_penguin_argument_defeats_bird_argument(self, birds, argument_for):
        """Test that the more specific attacker becomes a child."""
        root = DialecticalTree(argument_for(birds, "flies(tweety)"))
        (child,) = root.get_defeaters(birds, GENSPEC)
        assert child.argument == argument_for(birds, "~flies(tweety)")
        assert child.parent is root
        assert root.children == {child}
        assert root.get_marking() == Mark.DEFEATED

    def test_find_defeaters_does_not_attach(self, birds, argument_for):
        """Test that find_defeaters leaves the children untouched."""
        root = DialecticalTree(argument_for(birds, "flies(tweety)"))
        found = root.find_defeaters(birds, GENSPEC)
        assert len(found) == 1
        assert root.is_leaf()

    def test_get_defeaters_replaces_children(self, birds, argument_for):
        """Test that repeated expansion replaces the children."""
        root = DialecticalTree(argument_for(birds, "flies(tweety)"))
        first = root.get_defeaters(birds, GENSPEC)
        second = root.get_defeaters(birds, GENSPEC)
        assert root.children == second
        assert not (first & second)

    def test_no_defeaters_for_unattacked_argument(self, leaf, argument_for):
        """Test that an unattacked argument gets no children."""
        root = DialecticalTree(argument_for(leaf, "flies(tweety)"))
        assert root.get_defeaters(leaf, GENSPEC) == set()
        assert root.get_marking() == Mark.UNDEFEATED

    def test_less_specific_attack_is_rejected(self, birds, argument_for):
        """Test that a worse attacker is not a defeater."""
        root = DialecticalTree(argument_for(birds, "~flies(tweety)"))
        assert root.get_defeaters(birds, GENSPEC) == set()


class TestIsAcceptable:
    """Tests for the acceptability of argumentation lines."""

    def test_subargument_is_rejected(self, birds, argument_for):
        """Test that a subargument of the line is not acceptable."""
        flies = argument_for(birds, "flies(tweety)")
        root = DialecticalTree(flies)
        assert not root.is_acceptable(flies, birds, EmptyCriterion())

    def test_blocking_attack(self, birds, argument_for):
        """A worse attacker is rejected; with no preference it blocks."""
        root = DialecticalTree(argument_for(birds, "~flies(tweety)"))
        flies = argument_for(birds, "flies(tweety)")
        assert not root.is_acceptable(flies, birds, GENSPEC)
        assert root.is_acceptable(flies, birds, EmptyCriterion())

    def test_missing_criterion_means_empty(self, birds, argument_for):
        """Test that expansion without a criterion uses the empty one."""
        root = DialecticalTree(argument_for(birds, "~flies(tweety)"))
        flies = argument_for(birds, "flies(tweety)")
        assert root.is_acceptable(flies, birds, None)

    def test_concordance(self, make_program):
        """Supports at even distance behind the last argument must be consistent."""
        program = make_program(CONCORDANCE)
        x = DelpArgument.of(literal("x"), [_defeasible("x", "p")])
        y = DelpArgument.of(literal("y"), [_defeasible("y", "p")])
        q = DelpArgument.of(literal("q"), [_defeasible("q", "p")])

        root = DialecticalTree(x)
        assert root.is_acceptable(y, program, EmptyCriterion())

        inner = DialecticalTree(q, parent=root)
        assert not inner.is_acceptable(y, program, EmptyCriterion())

    def test_non_attacking_candidate_is_rejected(self, birds, argument_for):
        """An argument that disagrees with nothing in the line is no defeater."""
        root = DialecticalTree(argument_for(birds, "flies(tweety)"))
        rain = DelpArgument.of(literal("rain"), [_defeasible("rain")])
        assert not root.is_acceptable(rain, birds, EmptyCriterion())

    def test_proper_attack_after_blocking_attack(self, make_program, argument_for):
        """After a blocking defeater only a proper defeater is accepted."""
        program = make_program(NIXON_BOTH)
        pacifist = argument_for(program, "pacifist(nixon)", using="pacifist(nixon) -< quaker(nixon).")
        both = argument_for(program, "pacifist(nixon)", using="republican")
        hawk = argument_for(program, "~pacifist(nixon)")

        node = DialecticalTree(hawk, parent=DialecticalTree(pacifist))
        assert not node.is_acceptable(both, program, EmptyCriterion())
        assert node.is_acceptable(both, program, GENSPEC)


class TestRendering:
    """Tests for marking, traversal and rendering of expanded trees."""

    @staticmethod
    def _expand(root: DialecticalTree, program, criterion) -> DialecticalTree:
        pending = [root]
        while pending:
            pending.extend(pending.pop().get_defeaters(program, criterion))
        return root

    def test_reinstated_root(self, jetpack, argument_for):
        """Test that a defeater of the defeater reinstates the root."""
        flies = argument_for(jetpack, "flies(tweety)", using="bird")
        root = self._expand(DialecticalTree(flies), jetpack, GENSPEC)
        assert str(root) == (
            "[<{flies(tweety) -< bird(tweety).},flies(tweety)>"
            " - [<{~flies(tweety) -< penguin(tweety).},~flies(tweety)>"
            " - [<{flies(tweety) -< jetpack(tweety),penguin(tweety).},flies(tweety)>]]]"
        )
        assert root.get_marking() == Mark.UNDEFEATED
        assert [node.depth for node in root.iter_nodes()] == [0, 1, 2]
        assert [str(node.get_marking()) for node in root.iter_nodes()] == ["U", "D", "U"]

    def test_children_are_rendered_sorted(self, make_program, argument_for):
        """Test that rendering does not depend on set order."""
        program = make_program(NIXON_BOTH)
        hawk = argument_for(program, "~pacifist(nixon)")
        root = self._expand(DialecticalTree(hawk), program, EmptyCriterion())
        assert str(root) == (
            "[<{~pacifist(nixon) -< republican(nixon).},~pacifist(nixon)>"
            " - [<{pacifist(nixon) -< quaker(nixon),republican(nixon).},pacifist(nixon)>]"
            ", [<{pacifist(nixon) -< quaker(nixon).},pacifist(nixon)>]]"
        )
        assert root.get_marking() == Mark.DEFEATED

    def test_to_dict(self, birds, argument_for):
        """Test tree serialization."""
        root = self._expand(
            DialecticalTree(argument_for(birds, "flies(tweety)")), birds, GENSPEC
        )
        data = root.to_dict()
        assert data["mark"] == "D"
        assert data["argument"]["conclusion"] == "flies(tweety)"
        (child,) = data["children"]
        assert child["mark"] == "U"
        assert child["children"] == []
