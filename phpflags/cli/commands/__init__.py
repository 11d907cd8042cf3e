"""CLI command modules."""

import typer

from phpflags.cli.commands.flags import register_commands as register_flags_commands
from phpflags.cli.commands.locate import register_commands as register_locate_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_flags_commands(app)
    register_locate_commands(app)
