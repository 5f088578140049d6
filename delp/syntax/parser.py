"""
Parser for DeLP program text.

Reads the TweetyProject DeLP file syntax:

    % comment
    bird(tweety).
    ~flies(tina).
    bird(X) <- penguin(X).
    flies(X) -< bird(X).

Negation may be written ``~`` or ``!``. Every element ends with a period.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from delp.errors import DelpParseError
from delp.logging.logger import get_delp_logger
from delp.syntax.literal import Literal
from delp.syntax.program import DefeasibleLogicProgram
from delp.syntax.rules import DefeasibleRule, DelpFact, DelpRule, StrictRule

log = get_delp_logger("syntax")

_LITERAL_PATTERN = re.compile(
    r"^\s*(?P<neg>[~!]?)\s*(?P<pred>[A-Za-z_][A-Za-z0-9_]*)"
    r"\s*(?:\((?P<args>[^()]*)\))?\s*$"
)
_TERM_PATTERN = re.compile(r"^(?:[A-Za-z_][A-Za-z0-9_]*|-?\d+)$")
# Body literals are separated by commas outside of parentheses
_BODY_SPLIT = re.compile(r",(?![^()]*\))")


class DelpParser:
    """
    Parse DeLP programs and query literals.

    Example:
        >>> parser = DelpParser()
        >>> program = parser.parse_program("bird(tweety). flies(X) -< bird(X).")
        >>> parser.parse_literal("~flies(tweety)")
        Literal(~flies(tweety))
    """

    STRICT_ARROW = "<-"
    DEFEASIBLE_ARROW = "-<"

    def parse_literal(self, text: str, line: int | None = None) -> Literal:
        """Parse a single literal such as ``~flies(tweety)``."""
        match = _LITERAL_PATTERN.match(text)
        if not match:
            raise DelpParseError(f"Invalid literal: '{text.strip()}'", line)
        args: Tuple[str, ...] = ()
        if match.group("args") is not None:
            terms = [t.strip() for t in match.group("args").split(",")]
            for term in terms:
                if not _TERM_PATTERN.match(term):
                    raise DelpParseError(
                        f"Invalid term '{term}' in literal '{text.strip()}'", line
                    )
            args = tuple(terms)
        return Literal(match.group("pred"), args, negated=bool(match.group("neg")))

    def parse_rule(self, text: str, line: int | None = None) -> DelpRule:
        """Parse one program element; the trailing period is optional here."""
        statement = text.strip()
        if statement.endswith("."):
            statement = statement[:-1].rstrip()
        if not statement:
            raise DelpParseError("Empty statement", line)

        if self.DEFEASIBLE_ARROW in statement:
            head_text, body_text = statement.split(self.DEFEASIBLE_ARROW, 1)
            rule_class = DefeasibleRule
        elif self.STRICT_ARROW in statement:
            head_text, body_text = statement.split(self.STRICT_ARROW, 1)
            rule_class = StrictRule
        else:
            return DelpFact(self._parse_ground(statement, line))

        head = self.parse_literal(head_text, line)
        body = self._parse_body(body_text, line)
        if not body and rule_class is StrictRule:
            raise DelpParseError(
                f"Strict rule without body, write it as a fact: '{text.strip()}'", line
            )
        return rule_class(head, frozenset(body))

    def _parse_ground(self, text: str, line: int | None) -> Literal:
        lit = self.parse_literal(text, line)
        if not lit.is_ground():
            raise DelpParseError(f"Facts must be ground: '{text.strip()}'", line)
        return lit

    def _parse_body(self, text: str, line: int | None) -> List[Literal]:
        if not text.strip():
            return []
        return [self.parse_literal(part, line) for part in _BODY_SPLIT.split(text)]

    def _statements(self, text: str) -> Iterable[Tuple[str, int]]:
        """Split program text into statements with their starting line."""
        buffer: List[str] = []
        start = 0
        for number, raw in enumerate(text.splitlines(), 1):
            content = raw.split("%", 1)[0]
            for chunk in re.split(r"(?<=\.)", content):
                if not chunk.strip():
                    continue
                if not buffer:
                    start = number
                buffer.append(chunk)
                if chunk.rstrip().endswith("."):
                    yield " ".join(buffer), start
                    buffer = []
        if buffer:
            raise DelpParseError(
                f"Statement is missing its final period: '{' '.join(buffer).strip()}'",
                start,
            )

    def parse_program(self, text: str, name: str = "unnamed") -> DefeasibleLogicProgram:
        """Parse program text into a (not yet grounded) program."""
        program = DefeasibleLogicProgram(name=name)
        for statement, line in self._statements(text):
            program.add(self.parse_rule(statement, line))
        log.debug(f"Parsed program '{name}' with {len(program)} elements")
        return program

    def parse_file(self, path: Union[str, Path]) -> DefeasibleLogicProgram:
        path = Path(path)
        return self.parse_program(path.read_text(encoding="utf-8"), name=path.stem)

    def parse_files(self, paths: Iterable[Union[str, Path]]) -> DefeasibleLogicProgram:
        """Parse the concatenation of several program files."""
        paths = [Path(p) for p in paths]
        text = "\n".join(p.read_text(encoding="utf-8") for p in paths)
        name = "+".join(p.stem for p in paths) or "unnamed"
        return self.parse_program(text, name=name)
