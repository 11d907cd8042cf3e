"""Configuration for phpflags."""

from .settings import (
    PHP_CONFIG_ENV_VAR,
    SNAPSHOT_ENV_PREFIX,
    LocatorSettings,
    SnapshotSettings,
)
from .snapshot import describe_runtime, load_snapshot, snapshot_from_env


__all__ = [
    "PHP_CONFIG_ENV_VAR",
    "SNAPSHOT_ENV_PREFIX",
    "LocatorSettings",
    "SnapshotSettings",
    "describe_runtime",
    "load_snapshot",
    "snapshot_from_env",
]
