"""Shared CLI parameter definitions."""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer


SnapshotOption = Annotated[
    Path | None,
    typer.Option(
        "--snapshot",
        "-s",
        help="Read includes/defines from a YAML or JSON snapshot instead of php-config",
        dir_okay=False,
    ),
]

FromEnvOption = Annotated[
    bool,
    typer.Option(
        "--from-env",
        help="Read includes/defines from PHPFLAGS_INCLUDES and PHPFLAGS_DEFINES",
    ),
]

class OutputFormat(str, Enum):
    """Output formats supported by the flag commands."""

    TEXT = "text"
    JSON = "json"


OutputFormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format: text|json (default: text)",
        case_sensitive=False,
    ),
]
