"""Snapshot loading and runtime description selection."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from phpflags.config.settings import SnapshotSettings
from phpflags.core.errors import SnapshotLoadError
from phpflags.models.description import CommandBacked, SnapshotBacked


def snapshot_from_env(environ: Mapping[str, str] | None = None) -> SnapshotBacked:
    """Build a snapshot description from ``PHPFLAGS_*`` variables.

    Unset variables are left out of the mapping, so a missing
    ``PHPFLAGS_INCLUDES`` surfaces later as a missing key. ``environ``
    replaces the process environment when given.
    """
    return SnapshotBacked.from_mapping(
        SnapshotSettings.from_environ(environ).to_values()
    )


def _stringify(key: str, value: Any, path: Path) -> str:
    """Convert a snapshot value read from a file to its string form."""
    if isinstance(value, list | tuple):
        return ",".join(_stringify(key, item, path) for item in value)
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, str | int | float):
        return str(value)
    raise SnapshotLoadError(
        path, f"value for {key!r} must be a string, number or list"
    )


def load_snapshot(path: Path) -> SnapshotBacked:
    """Load a snapshot description from a YAML or JSON file.

    The document must be a flat mapping. List values are joined with commas
    so ``includes: [/a, /b]`` is equivalent to ``includes: "/a,/b"``.

    Args:
        path: Snapshot file, ``.json`` is parsed as JSON, anything else as YAML

    Returns:
        Snapshot-backed runtime description

    Raises:
        SnapshotLoadError: If the file cannot be read or has the wrong shape
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SnapshotLoadError(path, str(e)) from e

    try:
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SnapshotLoadError(path, f"invalid syntax: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SnapshotLoadError(path, "document must be a mapping")

    values = {
        str(key): _stringify(str(key), value, path)
        for key, value in data.items()
        if value is not None
    }
    return SnapshotBacked(values=values)


def describe_runtime(
    snapshot_file: Path | None = None,
    from_env: bool = False,
    environ: Mapping[str, str] | None = None,
) -> CommandBacked | SnapshotBacked:
    """Pick the runtime description for a build step.

    A snapshot file wins over the environment snapshot; without either the
    description falls back to running php-config. ``environ`` is only read
    for the environment snapshot.
    """
    if snapshot_file is not None:
        return load_snapshot(snapshot_file)
    if from_env:
        return snapshot_from_env(environ)
    return CommandBacked()
