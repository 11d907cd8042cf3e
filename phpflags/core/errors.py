"""Exception hierarchy for phpflags.

Every failure raised by the providers derives from :class:`PhpFlagsError` so
that a build driver can catch the whole family in one place. The subclasses
keep the details a caller needs to tell the failure modes apart.
"""

from pathlib import Path


class PhpFlagsError(Exception):
    """Base class for all phpflags errors."""


class LocatorError(PhpFlagsError):
    """Raised when the php-config executable cannot be located."""


class ConfiguredPathNotFoundError(LocatorError):
    """The override variable names a path that does not exist."""

    def __init__(self, path: Path, variable: str = "PHP_CONFIG") -> None:
        self.path = path
        self.variable = variable
        super().__init__(
            f"php-config executable not found at {str(path)!r} (set via {variable})"
        )


class ExecutableNotFoundError(LocatorError):
    """No override is set and the executable is not on the search path."""

    def __init__(self, name: str = "php-config", variable: str = "PHP_CONFIG") -> None:
        self.name = name
        self.variable = variable
        super().__init__(
            f"Could not find `{name}` executable. Please ensure `{name}` is in "
            f"your PATH or the `{variable}` environment variable is set."
        )


class ExecutionError(PhpFlagsError):
    """Raised when running php-config fails."""

    def __init__(self, message: str, command: list[str]) -> None:
        self.command = command
        super().__init__(message)


class SpawnError(ExecutionError):
    """The operating system refused to launch the executable."""

    def __init__(self, command: list[str], error: OSError) -> None:
        self.error = error
        super().__init__(f"Failed to run `{command[0]}`: {error}", command)


class NonZeroExitError(ExecutionError):
    """The executable ran but reported failure."""

    def __init__(
        self, command: list[str], returncode: int, stdout: str, stderr: str
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"Failed to run `{command[0]}` (exit code {returncode}): {stdout} {stderr}",
            command,
        )


class SnapshotError(PhpFlagsError):
    """Raised for problems with snapshot-backed configuration."""


class MissingKeyError(SnapshotError, KeyError):
    """A required key is absent from the snapshot."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"could not find {key} in snapshot")

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message
        return str(self.args[0])


class SnapshotLoadError(SnapshotError):
    """A snapshot file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load snapshot from {path}: {reason}")


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
