"""phpflags - PHP extension build flag discovery."""

from importlib.metadata import PackageNotFoundError, version

from .core.errors import PhpFlagsError
from .models.description import CommandBacked, RuntimeDescription, SnapshotBacked
from .provider import Provider


try:
    __version__ = version(__package__ or "phpflags")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "CommandBacked",
    "PhpFlagsError",
    "Provider",
    "RuntimeDescription",
    "SnapshotBacked",
    "__version__",
]
