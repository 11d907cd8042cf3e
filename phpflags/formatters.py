"""Render provider results as compiler flags."""

import shlex
from collections.abc import Iterable
from typing import Any

from phpflags.models.description import DefinePair, IncludePath


def format_include_flag(path: IncludePath) -> str:
    return f"-I{path}"


def format_define_flag(define: DefinePair) -> str:
    name, value = define
    return f"-D{name}={value}"


def format_compiler_flags(
    includes: Iterable[IncludePath], defines: Iterable[DefinePair]
) -> str:
    """Join include and define flags into one shell-quoted line."""
    flags = [format_include_flag(path) for path in includes]
    flags.extend(format_define_flag(define) for define in defines)
    return " ".join(shlex.quote(flag) for flag in flags)


def includes_to_json(includes: Iterable[IncludePath]) -> list[str]:
    return [str(path) for path in includes]


def defines_to_json(defines: Iterable[DefinePair]) -> list[dict[str, Any]]:
    return [{"name": name, "value": value} for name, value in defines]
