"""Locate command for the phpflags CLI."""

import typer

from phpflags.cli.decorators import handle_errors
from phpflags.locator import find_bin


@handle_errors
def locate_command() -> None:
    """Print the php-config executable that would be run.

    Honors PHP_CONFIG, falling back to a PATH search.
    """
    typer.echo(str(find_bin()))


def register_commands(app: typer.Typer) -> None:
    """Register locate command with the main app."""
    app.command(name="locate")(locate_command)
