"""
AMP CLI Application.

Root command dispatcher. Commands register here; global flags control
logging before any command runs.
"""

import typer
from rich.console import Console
from rich.markup import escape

from amp_cli.cli.commands import service_command, version_command
from amp_cli.core.config import get_app_config
from amp_cli.core.logging import setup_logging

app = typer.Typer(
    name="amp",
    help="AMP CLI - query the status of AMP services.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console(stderr=True)

# Register commands
app.command(name="service")(service_command)
app.command(name="version")(version_command)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    AMP CLI.

    Query AMP services from the command line.
    Built with Typer for type-safe commands and Rich for formatted output.
    """
    try:
        get_app_config()
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    # Configure logging based on flags
    if debug:
        setup_logging(level="DEBUG")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO")
    else:
        setup_logging()


def run() -> None:
    """Console script entry point."""
    app()
