"""Locate the php-config executable."""

import os
import shutil
from collections.abc import Mapping
from pathlib import Path

from phpflags.config.settings import PHP_CONFIG_ENV_VAR, LocatorSettings
from phpflags.core.errors import ConfiguredPathNotFoundError, ExecutableNotFoundError


PHP_CONFIG_NAME = "php-config"


def find_bin(environ: Mapping[str, str] | None = None) -> Path:
    """Resolve the path of the php-config executable.

    The ``PHP_CONFIG`` override takes priority. When it is set the path must
    exist, an explicit override never falls back to the PATH search. Nothing
    is cached, every call resolves again from the current environment.

    Args:
        environ: Environment mapping to read ``PHP_CONFIG`` and ``PATH`` from,
            defaults to the process environment

    Returns:
        Path of the executable

    Raises:
        ConfiguredPathNotFoundError: If ``PHP_CONFIG`` names a missing path
        ExecutableNotFoundError: If no override is set and PATH has no match
    """
    override = LocatorSettings.from_environ(environ).php_config
    if override is not None:
        if not override.exists():
            raise ConfiguredPathNotFoundError(override, PHP_CONFIG_ENV_VAR)
        return override

    search_path = None if environ is None else environ.get("PATH", os.defpath)
    found = shutil.which(PHP_CONFIG_NAME, path=search_path)
    if found is None:
        raise ExecutableNotFoundError(PHP_CONFIG_NAME, PHP_CONFIG_ENV_VAR)
    return Path(found).resolve()
