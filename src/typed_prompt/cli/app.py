"""
Main CLI application entry point.

This module contains the Typer application and command handlers
for Typed Prompt.
"""

from typing import Optional
import logging
import sys
import typer
from rich.console import Console
from rich.table import Table

from typed_prompt import VERSION
from typed_prompt.config.settings import get_settings
from typed_prompt.errors import InputClosedError, UnsupportedTypeError
from typed_prompt.parsing.builtin import TYPE_DESCRIPTIONS
from typed_prompt.parsing.types import ValueType
from typed_prompt.ui.typed_prompt import TypedPrompt

# Create the main Typer application
app = typer.Typer(
    name="typed-prompt",
    help="Typed Prompt - request typed values from the console",
    add_completion=False,
    rich_markup_mode="rich",
)

# Rich console for output
console = Console(soft_wrap=True)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold blue]Typed Prompt[/bold blue] version [green]{VERSION}[/green]")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send log records to stderr so they never mix with prompts."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@app.callback()
def callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """
    Typed Prompt - request typed values from the console.

    Prompts are repeated until the reply parses as the requested type.
    """
    settings = get_settings()
    configure_logging("DEBUG" if debug else settings.effective_log_level)


def _create_prompt() -> TypedPrompt:
    return TypedPrompt(console=console, settings=get_settings())


@app.command("ask")
def ask_command(
    value_type: str = typer.Argument(..., help="Type of value to request, e.g. integer or boolean"),
    message: str = typer.Argument(..., help="Prompt shown to the user"),
) -> None:
    """Request a value of TYPE and print the parsed result."""
    ui = _create_prompt()
    try:
        value = ui.request(value_type, message)
    except UnsupportedTypeError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print(f"[dim]Supported types: {', '.join(ui.supported_types())}[/dim]")
        raise typer.Exit(1)
    except InputClosedError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    ui.send(str(value))


@app.command("types")
def types_command() -> None:
    """List the types that can be requested."""
    table = Table(title="Supported Types")
    table.add_column("Type", style="cyan")
    table.add_column("Description")

    for value_type in ValueType:
        table.add_row(value_type.value, TYPE_DESCRIPTIONS[value_type])

    console.print(table)


@app.command("greet")
def greet_command() -> None:
    """Ask for a name and an age, then greet the user."""
    ui = _create_prompt()
    try:
        name = ui.request(ValueType.TEXT, "What is your name?")
        age = ui.request(ValueType.INTEGER, "How old are you?")
    except InputClosedError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    ui.send(f"Hello {name}, your age is {age}.")


def main() -> None:
    """Run the Typed Prompt CLI."""
    app()


if __name__ == "__main__":
    main()
