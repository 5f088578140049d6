"""
Custom exceptions for the DeLP engine.

Provides specific error types for the fatal failure modes of parsing,
tree construction and search. Degenerate results (NOT_COMPARABLE, empty
completion or defeater sets) are return values, not errors.
"""

from __future__ import annotations


class DelpError(Exception):
    """Base exception for all DeLP errors."""

    pass


class DelpSyntaxError(DelpError, ValueError):
    """Malformed literal or rule."""

    pass


class DelpParseError(DelpSyntaxError):
    """Error parsing DeLP program text or a query."""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class DelpConstructionError(DelpError, ValueError):
    """A dialectical tree node was built without an argument."""

    pass


class DelpPreconditionError(DelpError, ValueError):
    """An operation was invoked without a required collaborator."""

    pass


class ProgramNotGroundError(DelpError, ValueError):
    """The operation needs a program without variables."""

    pass


class UnknownCriterionError(DelpError, ValueError):
    """No comparison criterion is registered under the given name."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name


class SearchBudgetExceededError(DelpError):
    """A combinatorial search explored more states than allowed."""

    def __init__(self, message: str, explored: int, limit: int):
        super().__init__(message)
        self.explored = explored
        self.limit = limit
