"""Commands that print include paths, defines and compiler flags."""

import json
from pathlib import Path
from typing import Any

import typer

from phpflags.cli.decorators import handle_errors
from phpflags.cli.helpers.parameters import (
    FromEnvOption,
    OutputFormat,
    OutputFormatOption,
    SnapshotOption,
)
from phpflags.config.snapshot import describe_runtime
from phpflags.core.structlog_logger import get_struct_logger
from phpflags.formatters import (
    defines_to_json,
    format_compiler_flags,
    includes_to_json,
)
from phpflags.provider import Provider


logger = get_struct_logger(__name__)


def _create_provider(snapshot: Path | None, from_env: bool) -> Provider:
    info = describe_runtime(snapshot_file=snapshot, from_env=from_env)
    logger.debug("runtime_described", source=info.source)
    return Provider.from_info(info)


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


@handle_errors
def includes_command(
    snapshot: SnapshotOption = None,
    from_env: FromEnvOption = False,
    output_format: OutputFormatOption = OutputFormat.TEXT,
) -> None:
    """Print the include directories, one per line."""
    includes = _create_provider(snapshot, from_env).get_includes()
    logger.info("includes_resolved", count=len(includes))

    if output_format == OutputFormat.JSON:
        _echo_json(includes_to_json(includes))
        return
    for path in includes:
        typer.echo(str(path))


@handle_errors
def defines_command(
    snapshot: SnapshotOption = None,
    from_env: FromEnvOption = False,
    output_format: OutputFormatOption = OutputFormat.TEXT,
) -> None:
    """Print the preprocessor defines as NAME=VALUE, one per line."""
    defines = _create_provider(snapshot, from_env).get_defines()
    logger.info("defines_resolved", count=len(defines))

    if output_format == OutputFormat.JSON:
        _echo_json(defines_to_json(defines))
        return
    for name, value in defines:
        typer.echo(f"{name}={value}")


@handle_errors
def flags_command(
    snapshot: SnapshotOption = None,
    from_env: FromEnvOption = False,
    output_format: OutputFormatOption = OutputFormat.TEXT,
) -> None:
    """Print -I and -D compiler flags on a single line."""
    provider = _create_provider(snapshot, from_env)
    includes = provider.get_includes()
    defines = provider.get_defines()

    if output_format == OutputFormat.JSON:
        _echo_json(
            {"includes": includes_to_json(includes), "defines": defines_to_json(defines)}
        )
        return
    typer.echo(format_compiler_flags(includes, defines))


def register_commands(app: typer.Typer) -> None:
    """Register flag commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="includes")(includes_command)
    app.command(name="defines")(defines_command)
    app.command(name="flags")(flags_command)
