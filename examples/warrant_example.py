"""
Example usage of the DeLP warrant reasoner.

Demonstrates parsing a program, comparing arguments with generalized
specificity and inspecting dialectical trees.

Usage:
    python examples/warrant_example.py
"""

from pathlib import Path

from delp.logging import initialize_logging
from delp.reasoner import DelpReasoner
from delp.semantics import ArgumentCompletion, GeneralizedSpecificity
from delp.syntax import DelpParser, literal

PROGRAMS = Path(__file__).parent / "programs"

initialize_logging(level="WARNING", enable_file_logging=False)


def example_1_arguments():
    """
    Example 1: List the arguments of a program.
    """
    print("\n" + "=" * 70)
    print("Example 1: Arguments")
    print("=" * 70 + "\n")

    program = DelpParser().parse_file(PROGRAMS / "birds.delp").ground()
    for argument in sorted(program.get_arguments()):
        print(f"  {argument}")


def example_2_specificity():
    """
    Example 2: Compare two conflicting arguments.
    """
    print("\n" + "=" * 70)
    print("Example 2: Generalized Specificity")
    print("=" * 70 + "\n")

    program = DelpParser().parse_file(PROGRAMS / "birds.delp").ground()
    criterion = GeneralizedSpecificity()

    (fly,) = [
        arg
        for arg in program.get_arguments_with_conclusion(literal("flies(tina)"))
        if len(arg.support) == 1 and "scared" in str(arg)
    ]
    (no_fly,) = program.get_arguments_with_conclusion(literal("~flies(tina)"))

    for completion in ArgumentCompletion.get_completions(fly, program):
        sets = GeneralizedSpecificity.get_activation_sets(completion)
        print(f"  {completion}: {len(sets)} activation set(s)")

    result = criterion.compare(fly, no_fly, program)
    print(f"\n  {fly}\n  vs\n  {no_fly}\n  => {result.name}")


def example_3_trees():
    """
    Example 3: Answer queries and print the deciding trees.
    """
    print("\n" + "=" * 70)
    print("Example 3: Dialectical Trees")
    print("=" * 70 + "\n")

    reasoner = DelpReasoner("genspec")
    for name, query in [("birds", "~flies(tina)"), ("nixon", "pacifist(nixon)")]:
        program = DelpParser().parse_file(PROGRAMS / f"{name}.delp")
        answer = reasoner.query(program, query)
        print(f"{answer}  ({answer.explanation})")
        for tree in answer.trees:
            print(f"  {tree.get_marking()} {tree}")
        print()


if __name__ == "__main__":
    example_1_arguments()
    example_2_specificity()
    example_3_trees()
