"""Command-line interface for phpflags using Typer."""

from phpflags.cli.app import app, main
from phpflags.cli.commands import register_all_commands


register_all_commands(app)


__all__ = ["app", "main"]
