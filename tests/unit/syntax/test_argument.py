"""
Unit tests for DelpArgument.
"""

import pytest

from delp.errors import DelpSyntaxError
from delp.syntax.argument import DelpArgument
from delp.syntax.literal import literal
from delp.syntax.rules import DefeasibleRule

FLIES = DefeasibleRule(literal("flies(tweety)"), {literal("bird(tweety)")})


class TestArgumentBasics:
    """Tests for construction, identity and rendering."""

    def test_str(self):
        """Test argument rendering."""
        argument = DelpArgument.of(literal("flies(tweety)"), [FLIES])
        assert str(argument) == "<{flies(tweety) -< bird(tweety).},flies(tweety)>"

    def test_str_of_empty_support(self):
        """Test rendering of a strict argument."""
        assert str(DelpArgument.of(literal("bird(tweety)"))) == "<{},bird(tweety)>"

    def test_conclusion_is_required(self):
        """Test that an argument without a conclusion is rejected."""
        with pytest.raises(DelpSyntaxError):
            DelpArgument(None, frozenset({FLIES}))

    def test_fields_are_conclusion_then_support(self):
        """Test positional construction order."""
        argument = DelpArgument(literal("flies(tweety)"), [FLIES])
        assert argument.conclusion == literal("flies(tweety)")
        assert argument.support == frozenset({FLIES})

    def test_identity_is_support_and_conclusion(self):
        """Test that equal support and conclusion give equal arguments."""
        first = DelpArgument.of(literal("flies(tweety)"), [FLIES])
        second = DelpArgument(literal("flies(tweety)"), frozenset([FLIES]))
        assert first == second
        assert len({first, second}) == 1
        assert first != DelpArgument.of(literal("bird(tweety)"), [FLIES])

    def test_subargument_is_support_inclusion(self):
        """Test subargument and strong subargument relations."""
        empty = DelpArgument.of(literal("bird(tweety)"))
        flies = DelpArgument.of(literal("flies(tweety)"), [FLIES])
        assert empty.is_subargument_of(flies)
        assert empty.is_strong_subargument_of(flies)
        assert flies.is_subargument_of(flies)
        assert not flies.is_strong_subargument_of(flies)
        assert not flies.is_subargument_of(empty)

    def test_to_dict(self):
        """Test argument serialization."""
        argument = DelpArgument.of(literal("flies(tweety)"), [FLIES])
        assert argument.to_dict() == {
            "conclusion": "flies(tweety)",
            "support": ["flies(tweety) -< bird(tweety)."],
        }


class TestDisagreement:
    """Tests for attack opportunities and disagreement subarguments."""

    CHAIN = "c. a -< b. b -< c."

    def test_conclusion_set(self, make_program, argument_for):
        """Test that the conclusion set includes intermediate conclusions."""
        program = make_program(self.CHAIN)
        argument = argument_for(program, "a", size=2)
        assert argument.get_conclusion_set() == {literal("a"), literal("b")}

    def test_attack_opportunities_include_complements(
        self, make_program, argument_for
    ):
        """Test that complements of the conclusion set are attack opportunities."""
        program = make_program(self.CHAIN)
        argument = argument_for(program, "a", size=2)
        assert {literal("~a"), literal("~b")} <= argument.get_attack_opportunities(program)

    def test_attack_opportunities_in_birds(self, birds, argument_for):
        """Test attack opportunities reached through strict rules."""
        argument = argument_for(birds, "flies(tweety)")
        assert argument.get_attack_opportunities(birds) == {literal("~flies(tweety)")}

    def test_attack_opportunities_through_strict_rules(
        self, make_program, argument_for
    ):
        """A literal that strictly implies the complement is an opportunity."""
        program = make_program(
            "~bird(X) <- fish(X). bird(X) -< feathers(X). feathers(nemo)."
        )
        argument = argument_for(program, "bird(nemo)")
        assert argument.get_attack_opportunities(program) == {
            literal("~bird(nemo)"),
            literal("fish(nemo)"),
        }

    def test_disagreement_with_own_conclusion(self, birds, argument_for):
        """Test that the argument itself disagrees with the complement."""
        argument = argument_for(birds, "flies(tweety)")
        assert argument.get_disagreement_subargument(literal("~flies(tweety)"), birds) == argument

    def test_disagreement_with_inner_conclusion(self, make_program, argument_for):
        """The subargument for the attacked inner literal is returned."""
        program = make_program(self.CHAIN)
        argument = argument_for(program, "a", size=2)
        subargument = argument.get_disagreement_subargument(literal("~b"), program)
        assert subargument == argument_for(program, "b", size=1)
        assert subargument.is_subargument_of(argument)

    def test_no_disagreement(self, make_program, argument_for):
        """Test that unrelated literals give no disagreement subargument."""
        program = make_program(self.CHAIN)
        argument = argument_for(program, "a", size=2)
        assert argument.get_disagreement_subargument(literal("d"), program) is None
