"""
Command-line interface for the DeLP engine.

Loads one or more DeLP files and answers warrant queries, lists the
arguments of a program or prints its dialectical trees.

Example:
    delp query examples/programs/birds.delp -q "flies(tweety)" -c genspec
"""

import json
from pathlib import Path
from typing import List, Optional, Tuple

import click

from delp.config import config
from delp.errors import DelpError
from delp.logging.logger import get_delp_logger, initialize_logging
from delp.reasoner import DelpReasoner
from delp.syntax.parser import DelpParser
from delp.syntax.program import DefeasibleLogicProgram

log = get_delp_logger("cli")

CRITERION_CHOICE = click.Choice(["empty", "genspec"], case_sensitive=False)


def _load_program(files: Tuple[str, ...]) -> DefeasibleLogicProgram:
    try:
        return DelpParser().parse_files(files)
    except DelpError as e:
        raise click.ClickException(f"Cannot parse program: {e}") from e


def _read_batch(batch_file: str) -> List[str]:
    queries = [
        line.strip()
        for line in Path(batch_file).read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.strip().startswith("%")
    ]
    if not queries:
        raise click.UsageError(f"Batch file {batch_file} contains no queries")
    return queries


@click.group()
def cli():
    """Defeasible Logic Programming (DeLP) reasoner."""
    initialize_logging(
        log_dir=config.logging.log_path,
        level=config.logging.level,
        format_string=config.logging.format,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        enable_file_logging=config.logging.enable_file_logging,
        enable_console_logging=config.logging.enable_console_logging,
    )


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("-q", "--query", "query", default=None, help="Literal to query")
@click.option(
    "-b",
    "--batch",
    "batch_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="File with one query per line",
)
@click.option(
    "-c",
    "--criterion",
    type=CRITERION_CHOICE,
    default=config.reasoner.criterion,
    show_default=True,
    help="Comparison criterion",
)
@click.option("--max-depth", type=click.IntRange(min=1), default=None, help="Maximum tree depth")
@click.option("--verbose", is_flag=True, help="Print the parsed program")
@click.option("--time", "show_time", is_flag=True, help="Print query timing")
@click.option("--json", "as_json", is_flag=True, help="Print answers as JSON")
def query(
    files: Tuple[str, ...],
    query: Optional[str],
    batch_file: Optional[str],
    criterion: str,
    max_depth: Optional[int],
    verbose: bool,
    show_time: bool,
    as_json: bool,
):
    """
    Answer warrant queries over the program in FILES.

    Example:
        delp query birds.delp -q "~flies(tina)"
    """
    if query is None and batch_file is None:
        raise click.UsageError("Give a query with -q or a batch file with -b")
    queries = [query] if query is not None else _read_batch(batch_file)

    program = _load_program(files)
    if verbose:
        click.echo("DeLP program:")
        click.echo(str(program))

    reasoner = DelpReasoner(
        criterion=criterion.lower(),
        max_tree_depth=max_depth if max_depth is not None else config.reasoner.max_tree_depth,
        max_completions=config.reasoner.max_completions,
    )
    log.debug(f"Answering {len(queries)} queries with {reasoner!r}")

    results = []
    for text in queries:
        try:
            answer = reasoner.query(program, text)
        except DelpError as e:
            raise click.ClickException(f"Query '{text}' failed: {e}") from e

        if as_json:
            results.append(answer.to_dict())
            continue
        click.echo(str(answer))
        if verbose:
            click.echo(f"  {answer.explanation}")
        if show_time:
            click.echo(f"  ({answer.elapsed_ms:.2f} ms)")

    if as_json:
        click.echo(json.dumps(results, indent=2))


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def arguments(files: Tuple[str, ...]):
    """List every argument of the grounded program in FILES."""
    program = _load_program(files)
    ground = program if program.is_ground() else program.ground()
    found = sorted(ground.get_arguments())
    for argument in found:
        click.echo(str(argument))
    click.echo(f"\n{len(found)} arguments")


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("-q", "--query", "query", required=True, help="Literal whose trees to print")
@click.option(
    "-c",
    "--criterion",
    type=CRITERION_CHOICE,
    default=config.reasoner.criterion,
    show_default=True,
    help="Comparison criterion",
)
def tree(files: Tuple[str, ...], query: str, criterion: str):
    """Print the dialectical trees for every argument of QUERY."""
    program = _load_program(files)
    reasoner = DelpReasoner(
        criterion=criterion.lower(),
        max_tree_depth=config.reasoner.max_tree_depth,
        max_completions=config.reasoner.max_completions,
    )
    try:
        answer = reasoner.query(program, query)
    except DelpError as e:
        raise click.ClickException(f"Query '{query}' failed: {e}") from e

    if not answer.trees:
        click.echo(f"No arguments for {answer.query}")
    for dtree in answer.trees:
        click.echo(f"{dtree.get_marking()} {dtree}")
    click.echo(str(answer))


if __name__ == "__main__":
    cli()
