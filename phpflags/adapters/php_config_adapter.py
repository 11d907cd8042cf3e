"""Adapter for running the php-config executable."""

import subprocess
from collections.abc import Callable
from pathlib import Path

from phpflags.core.errors import NonZeroExitError, SpawnError
from phpflags.locator import find_bin


INCLUDES_FLAG = "--includes"


def decode_output(data: bytes | None) -> str:
    """Decode process output, replacing invalid byte sequences."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


class PhpConfigAdapter:
    """Runs php-config with a single argument and returns its stdout."""

    def __init__(self, locate: Callable[[], Path] | None = None) -> None:
        """Initialize the adapter.

        Args:
            locate: Callable resolving the executable path, called on every
                run. Defaults to the PHP_CONFIG / PATH lookup.
        """
        self._locate = locate

    def locate(self) -> Path:
        """Resolve the executable this adapter runs."""
        locate = self._locate or find_bin
        return locate()

    def run(self, arg: str) -> str:
        """Run ``php-config <arg>`` and return its standard output.

        The call blocks until the process exits. There is no timeout and no
        retry.

        Args:
            arg: The single flag to pass, e.g. ``--includes``

        Returns:
            Standard output of the process

        Raises:
            LocatorError: If the executable cannot be located
            SpawnError: If the process cannot be started
            NonZeroExitError: If the process exits with a non-zero status
        """
        command = [str(self.locate()), arg]

        try:
            result = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise SpawnError(command, e) from e

        stdout = decode_output(result.stdout)
        if result.returncode != 0:
            raise NonZeroExitError(
                command, result.returncode, stdout, decode_output(result.stderr)
            )
        return stdout


def create_php_config_adapter(
    locate: Callable[[], Path] | None = None,
) -> PhpConfigAdapter:
    """Factory function to create a PhpConfigAdapter instance.

    Returns:
        Configured PhpConfigAdapter instance
    """
    return PhpConfigAdapter(locate)


def php_config(arg: str) -> str:
    """Run php-config with one argument, returning the stdout."""
    return create_php_config_adapter().run(arg)
