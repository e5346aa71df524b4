# src/larklang/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..config import config
from ..errors import LarkError, ParseFailure
from ..evaluator import is_error
from ..interpreter import parse_source, read_source, run_source
from ..lexer import Lexer
from ..lark_token import EOF
from ..object import NULL
from ..repl import Repl

console = Console()


def _configure_logging():
    level = logging.DEBUG if (config.enable_debug_logs or config.trace_parser) else config.logging_level
    root = logging.getLogger("larklang")
    root.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _print_parse_errors(errors):
    console.print("[bold red]Parser Errors:[/bold red]")
    for error in errors:
        console.print(Text("  " + error))


@click.group()
@click.version_option(version=__version__, prog_name="Lark")
@click.option("--debug", is_flag=True, help="Log evaluator steps.")
@click.option("--trace", is_flag=True, help="Trace parse functions.")
def cli(debug, trace):
    """Lark Programming Language - a small tree-walking interpreter"""
    if debug:
        config.enable_debug_logs = True
        config.log_level = "debug"
    if trace:
        config.trace_parser = True
    _configure_logging()

@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def run(file):
    """Run a Lark program"""
    try:
        source_code = read_source(file)
        result = run_source(source_code, filename=file)
    except ParseFailure as e:
        _print_parse_errors(e.errors)
        sys.exit(1)
    except RecursionError:
        console.print("[bold red]Error:[/bold red] maximum recursion depth exceeded")
        sys.exit(1)
    except LarkError as e:
        console.print(Text(f"Error: {e}", style="bold red"))
        sys.exit(1)

    if is_error(result):
        console.print(Text(result.inspect(), style="bold red"))
        sys.exit(1)

    if result is not None and result is not NULL:
        console.print(Text(result.inspect()))

@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check syntax of a Lark file"""
    try:
        parse_source(read_source(file), filename=file)
    except ParseFailure as e:
        console.print("[bold red]Syntax Errors Found:[/bold red]")
        for error in e.errors:
            console.print(Text("  " + error))
        sys.exit(1)
    except LarkError as e:
        console.print(Text(f"Error: {e}", style="bold red"))
        sys.exit(1)

    console.print("[bold green]Syntax is valid![/bold green]")

@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show the parsed program of a Lark file"""
    try:
        program = parse_source(read_source(file), filename=file)
    except ParseFailure as e:
        _print_parse_errors(e.errors)
        sys.exit(1)
    except LarkError as e:
        console.print(Text(f"Error: {e}", style="bold red"))
        sys.exit(1)

    console.print(Panel.fit(
        Text("\n".join(str(stmt) for stmt in program.statements)),
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue"
    ))

@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Lark file"""
    try:
        source_code = read_source(file)
    except LarkError as e:
        console.print(Text(f"Error: {e}", style="bold red"))
        sys.exit(1)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in Lexer(source_code, filename=file):
        if token.type == EOF:
            break
        table.add_row(token.type, Text(token.literal), str(token.line), str(token.column))

    console.print(table)

@cli.command()
def repl():
    """Start the Lark REPL"""
    Repl(console=console).run()

if __name__ == "__main__":
    cli()
