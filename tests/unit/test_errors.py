"""
Unit tests for the DeLP exception hierarchy.
"""

import pytest

from delp.errors import (
    DelpConstructionError,
    DelpError,
    DelpParseError,
    DelpPreconditionError,
    DelpSyntaxError,
    ProgramNotGroundError,
    SearchBudgetExceededError,
    UnknownCriterionError,
)


class TestHierarchy:
    """All errors share the DelpError base."""

    @pytest.mark.parametrize(
        "error_class",
        [
            DelpSyntaxError,
            DelpParseError,
            DelpConstructionError,
            DelpPreconditionError,
            ProgramNotGroundError,
        ],
    )
    def test_value_errors(self, error_class):
        """Test that input errors are ValueErrors."""
        assert issubclass(error_class, DelpError)
        assert issubclass(error_class, ValueError)

    def test_budget_error_is_not_a_value_error(self):
        """Test that budget errors are not input errors."""
        assert issubclass(SearchBudgetExceededError, DelpError)
        assert not issubclass(SearchBudgetExceededError, ValueError)


class TestErrorAttributes:
    """Errors keep the details needed to report them."""

    def test_parse_error_line(self):
        """Test that parse errors prefix the line number."""
        error = DelpParseError("Invalid literal", line=7)
        assert error.line == 7
        assert str(error) == "line 7: Invalid literal"

    def test_parse_error_without_line(self):
        """Test parse errors without a line number."""
        error = DelpParseError("Invalid literal")
        assert error.line is None
        assert str(error) == "Invalid literal"

    def test_unknown_criterion_name(self):
        """Test that the unknown criterion error keeps the name."""
        error = UnknownCriterionError("no such criterion", name="priority")
        assert error.name == "priority"

    def test_budget_details(self):
        """Test that the budget error keeps explored and limit."""
        error = SearchBudgetExceededError("too many", explored=11, limit=10)
        assert error.explored == 11
        assert error.limit == 10
