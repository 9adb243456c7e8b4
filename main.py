"""
Main CLI interface for grammar2cnf.
Runs the conversion pipeline: load -> validate format -> check preconditions -> transform -> write.
"""
import sys
import click

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from grammar2cnf import __version__
from grammar2cnf.logger import app_logger
from grammar2cnf.grammar import (
    GrammarError, GrammarIOError, GrammarFormatError, PreconditionError,
    load_grammar, validate_format, check_preconditions, transform_to_cnf, write_grammar,
    ReachabilityAnalyzer,
)

console = Console()
err_console = Console(stderr=True)

EXIT_CODES = {
    GrammarIOError: 3,
    GrammarFormatError: 4,
    PreconditionError: 5,
}

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


def fail(error: GrammarError):
    """Report a pipeline error and exit with the status of its kind."""
    err_console.print(f"[red]Error: {escape(error.message)}[/red]")
    app_logger.debug(f"Exiting after {type(error).__name__}")
    sys.exit(EXIT_CODES.get(type(error), 1))


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__)
def cli():
    """grammar2cnf - convert context-free grammars (.gra files) to Chomsky Normal Form.

    Input grammars must not contain empty (&) or unit (A -> B) productions."""
    pass


@cli.command()
@click.argument('input', type=click.Path(dir_okay=False))
@click.argument('output', type=click.Path(dir_okay=False))
def convert(input: str, output: str):
    """Convert the grammar in INPUT to CNF and write it to OUTPUT."""
    try:
        grammar = load_grammar(input)
        validate_format(grammar)
        check_preconditions(grammar)
        transform_to_cnf(grammar)
        write_grammar(grammar, output)
    except GrammarError as e:
        fail(e)

    console.print(f"[green]Conversion completed. Output file: {output}[/green]")


@cli.command()
@click.argument('input', type=click.Path(dir_okay=False))
def check(input: str):
    """Validate INPUT and report whether it can be converted."""
    try:
        grammar = load_grammar(input)
        validate_format(grammar)
        check_preconditions(grammar)
    except GrammarError as e:
        fail(e)

    console.print(f"[green]{input} is well-formed and has no empty or unit productions[/green]")


@cli.command()
@click.argument('input', type=click.Path(dir_okay=False))
def reachable(input: str):
    """Compare declared and reachable non-terminals of INPUT."""
    try:
        grammar = load_grammar(input)
        validate_format(grammar)
    except GrammarError as e:
        fail(e)

    analyzer = ReachabilityAnalyzer(grammar)
    declared = analyzer.declared()
    reached = analyzer.reachable()

    table = Table(title=f"Non-terminals (start symbol {grammar.start_symbol})")
    table.add_column("Non-terminal", style="cyan")
    table.add_column("Reachable", style="green")

    for name in sorted(declared):
        table.add_row(name, "yes" if name in reached else "[red]no[/red]")

    console.print(table)

    unreachable = sorted(declared - reached)
    if unreachable:
        console.print(f"[yellow]Unreachable: {', '.join(unreachable)}[/yellow]")
    else:
        console.print("[green]All declared non-terminals are reachable[/green]")


@cli.command()
@click.argument('input', type=click.Path(dir_okay=False))
def show(input: str):
    """Print the productions of INPUT."""
    try:
        grammar = load_grammar(input)
    except GrammarError as e:
        fail(e)

    table = Table(title=f"{input}")
    table.add_column("LHS", style="cyan")
    table.add_column("RHS", style="white")

    for production in grammar.productions:
        table.add_row(escape(production.lhs), escape(" ".join(str(s) for s in production.rhs) or "&"))

    console.print(table)
    console.print(f"Terminals: {escape(' '.join(sorted(grammar.terminals)))}")
    console.print(f"Non-terminals: {escape(' '.join(sorted(grammar.nonterminals)))} (start: {escape(grammar.start_symbol)})")
    console.print(f"CNF: {'yes' if grammar.is_cnf() else 'no'}")


if __name__ == '__main__':
    cli()
