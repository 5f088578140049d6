"""
Shared fixtures: small DeLP programs used across the test suite.
"""

import pytest

from delp.syntax import DefeasibleLogicProgram, DelpArgument, DelpParser, literal

BIRDS = """
% Tweety is a penguin, penguins are birds
bird(X) <- penguin(X).
penguin(tweety).
flies(X) -< bird(X).
~flies(X) -< penguin(X).
"""

NIXON = """
quaker(nixon).
republican(nixon).
pacifist(X) -< quaker(X).
~pacifist(X) -< republican(X).
"""

# A reinstating argument three levels deep
JETPACK = BIRDS + """
jetpack(tweety).
flies(X) -< penguin(X), jetpack(X).
"""

LEAF = """
bird(tweety).
flies(X) -< bird(X).
"""


def ground(text: str) -> DefeasibleLogicProgram:
    return DelpParser().parse_program(text).ground()


def the_argument(
    program: DefeasibleLogicProgram, conclusion: str, size: int = 1, using: str = ""
) -> DelpArgument:
    """
    The unique argument for ``conclusion`` with ``size`` support rules, one
    of which renders containing ``using``.
    """
    matches = [
        arg
        for arg in program.get_arguments_with_conclusion(literal(conclusion))
        if len(arg.support) == size
        and (not using or any(using in str(rule) for rule in arg.support))
    ]
    assert len(matches) == 1, matches
    return matches[0]


@pytest.fixture
def birds() -> DefeasibleLogicProgram:
    return ground(BIRDS)


@pytest.fixture
def nixon() -> DefeasibleLogicProgram:
    return ground(NIXON)


@pytest.fixture
def jetpack() -> DefeasibleLogicProgram:
    return ground(JETPACK)


@pytest.fixture
def leaf() -> DefeasibleLogicProgram:
    return ground(LEAF)


@pytest.fixture
def make_program():
    """Parse and ground program text."""
    return ground


@pytest.fixture
def argument_for():
    """Look up the unique argument for a conclusion and support size."""
    return the_argument
