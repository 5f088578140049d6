"""
Syntax of defeasible logic programs.

## Main Components

- **Literal**: Possibly negated atom ``~p(a,b)``
- **DelpFact / StrictRule / DefeasibleRule**: The three kinds of program elements
- **DelpArgument**: Support and conclusion of an argument
- **DefeasibleLogicProgram**: Collection of rules with strict closure and
  argument enumeration
- **DelpParser**: Reader for DeLP program text

## Example Usage

```python
from delp.syntax import DelpParser

program = DelpParser().parse_program('''
    bird(X) <- penguin(X).
    penguin(tweety).
    flies(X) -< bird(X).
    ~flies(X) -< penguin(X).
''').ground()

for argument in sorted(program.get_arguments()):
    print(argument)
```
"""

from .literal import Literal, collect_constants, format_literals, is_variable, literal
from .rules import DefeasibleRule, DelpFact, DelpRule, StrictRule, make_rule
from .argument import DelpArgument
from .program import DefeasibleLogicProgram
from .parser import DelpParser

__all__ = [
    # Literals
    "Literal",
    "literal",
    "is_variable",
    "format_literals",
    "collect_constants",
    # Rules
    "DelpRule",
    "DelpFact",
    "StrictRule",
    "DefeasibleRule",
    "make_rule",
    # Arguments and programs
    "DelpArgument",
    "DefeasibleLogicProgram",
    "DelpParser",
]
