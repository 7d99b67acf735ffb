"""
System Commands.

Commands for application information.
"""

import typer

from amp_cli.core.config import get_app_config


def version() -> None:
    """
    Display version information.
    """
    app_config = get_app_config()
    typer.echo(f"{app_config.application.name} {app_config.application.version}")
