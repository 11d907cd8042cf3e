"""Compiler flag provider for POSIX PHP installations.

The provider answers two questions for an extension build: which include
directories the compiler needs and which preprocessor defines must be set.
Answers come from one of two sources, selected by the runtime description
the provider is bound to:

- ``CommandBacked``: include paths are read from ``php-config --includes``.
  Defines are not requested from php-config, the list is always empty.
- ``SnapshotBacked``: both answers come from the snapshot keys ``includes``
  (required) and ``defines`` (optional).
"""

from pathlib import Path
from typing import assert_never

from phpflags.adapters.php_config_adapter import INCLUDES_FLAG, PhpConfigAdapter
from phpflags.core.errors import MissingKeyError
from phpflags.models.description import (
    CommandBacked,
    DefinePair,
    IncludePath,
    SnapshotBacked,
)


INCLUDE_FLAG_PREFIX = "-I"
DEFAULT_DEFINE_VALUE = "1"


def parse_include_flags(output: str) -> list[IncludePath]:
    """Turn ``php-config --includes`` output into include paths.

    Tokens are split on whitespace and a leading ``-I`` is stripped. Tokens
    without the prefix are kept unchanged. Empty output gives no paths.
    """
    return [
        Path(token.removeprefix(INCLUDE_FLAG_PREFIX)) for token in output.split()
    ]


def parse_include_list(value: str) -> list[IncludePath]:
    """Split a comma separated snapshot value into include paths."""
    return [Path(segment) for segment in value.split(",")]


def parse_define_list(value: str) -> list[DefinePair]:
    """Split a comma separated ``NAME`` / ``NAME=VALUE`` list into pairs.

    Only the first ``=`` separates name from value, so ``A=b=c`` gives
    ``("A", "b=c")`` and ``FOO=`` gives ``("FOO", "")``.
    """
    defines: list[DefinePair] = []
    for segment in value.split(","):
        name, sep, define_value = segment.partition("=")
        defines.append((name, define_value) if sep else (segment, DEFAULT_DEFINE_VALUE))
    return defines


class Provider:
    """Build flag provider bound to a single runtime description."""

    def __init__(
        self,
        info: CommandBacked | SnapshotBacked,
        adapter: PhpConfigAdapter | None = None,
    ) -> None:
        self.info = info
        self._adapter = adapter or PhpConfigAdapter()

    @classmethod
    def from_info(cls, info: CommandBacked | SnapshotBacked) -> "Provider":
        """Bind a provider to ``info``. Performs no I/O and never fails."""
        return cls(info)

    def find_bin(self) -> Path:
        """Resolve the php-config executable the provider would run."""
        return self._adapter.locate()

    def php_config(self, arg: str) -> str:
        """Run php-config with one argument, returning the stdout."""
        return self._adapter.run(arg)

    def get_includes(self) -> list[IncludePath]:
        """Return the include paths for the bound runtime.

        Raises:
            MissingKeyError: If a snapshot has no ``includes`` key
            LocatorError: If php-config cannot be located
            ExecutionError: If php-config cannot be run or fails
        """
        match self.info:
            case SnapshotBacked():
                includes = self.info.get_key("includes")
                if includes is None:
                    raise MissingKeyError("includes")
                return parse_include_list(includes)
            case CommandBacked():
                return parse_include_flags(self.php_config(INCLUDES_FLAG))
            case _:
                assert_never(self.info)

    def get_defines(self) -> list[DefinePair]:
        """Return the preprocessor defines for the bound runtime."""
        match self.info:
            case SnapshotBacked():
                defines = self.info.get_key("defines")
                if defines is None:
                    return []
                return parse_define_list(defines)
            case CommandBacked():
                return []
            case _:
                assert_never(self.info)
