"""
CLI Commands.

Organized by domain/feature area.
"""

from amp_cli.cli.commands.service import service as service_command
from amp_cli.cli.commands.system import version as version_command

__all__ = [
    "service_command",
    "version_command",
]
