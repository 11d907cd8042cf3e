"""Data models for phpflags."""

from .base import PhpFlagsBaseModel
from .description import (
    CommandBacked,
    DefinePair,
    IncludePath,
    RuntimeDescription,
    SnapshotBacked,
    parse_description,
)


__all__ = [
    "CommandBacked",
    "DefinePair",
    "IncludePath",
    "PhpFlagsBaseModel",
    "RuntimeDescription",
    "SnapshotBacked",
    "parse_description",
]
