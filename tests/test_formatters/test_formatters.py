"""Tests for compiler flag formatting."""

from pathlib import Path

from phpflags.formatters import (
    defines_to_json,
    format_compiler_flags,
    format_define_flag,
    format_include_flag,
    includes_to_json,
)


def test_format_include_flag():
    assert format_include_flag(Path("/usr/include/php")) == "-I/usr/include/php"


def test_format_define_flag():
    assert format_define_flag(("ZTS", "1")) == "-DZTS=1"
    assert format_define_flag(("EMPTY", "")) == "-DEMPTY="


def test_format_compiler_flags_order():
    """Test includes come first, then defines, in their given order."""
    flags = format_compiler_flags(
        [Path("/a"), Path("/b")], [("FOO", "1"), ("BAR", "baz")]
    )
    assert flags == "-I/a -I/b -DFOO=1 -DBAR=baz"


def test_format_compiler_flags_quotes_spaces():
    """Test flags containing spaces are shell-quoted."""
    flags = format_compiler_flags([Path("/opt/my php/include")], [])
    assert flags == "'-I/opt/my php/include'"


def test_format_compiler_flags_empty():
    assert format_compiler_flags([], []) == ""


def test_json_helpers():
    assert includes_to_json([Path("/a")]) == ["/a"]
    assert defines_to_json([("FOO", "1")]) == [{"name": "FOO", "value": "1"}]
