"""Core infrastructure: errors and logging."""

from .errors import (
    ConfiguredPathNotFoundError,
    ExecutableNotFoundError,
    ExecutionError,
    LocatorError,
    MissingKeyError,
    NonZeroExitError,
    PhpFlagsError,
    SnapshotError,
    SnapshotLoadError,
    SpawnError,
)


__all__ = [
    "ConfiguredPathNotFoundError",
    "ExecutableNotFoundError",
    "ExecutionError",
    "LocatorError",
    "MissingKeyError",
    "NonZeroExitError",
    "PhpFlagsError",
    "SnapshotError",
    "SnapshotLoadError",
    "SpawnError",
]
