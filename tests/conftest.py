"""Core test fixtures for the phpflags project."""

import stat
from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner


ENV_VARS = ("PHP_CONFIG", "PHPFLAGS_INCLUDES", "PHPFLAGS_DEFINES")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove variables that steer php-config lookup and snapshots."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_php_config(tmp_path: Path) -> Callable[..., Path]:
    """Create a fake php-config shell script.

    The script prints ``stdout`` and ``stderr`` through ``printf %b``
    (so ``\\n`` and octal escapes like ``\\0377`` work), records its arguments in
    ``args.txt`` next to itself and exits with ``exit_code``.

    Usage:
        def test_something(make_php_config):
            script = make_php_config(stdout="-I/usr/include/php")
    """

    def _make(
        stdout: str = "",
        stderr: str = "",
        exit_code: int = 0,
        name: str = "php-config",
        directory: Path | None = None,
    ) -> Path:
        bin_dir = directory or tmp_path / "bin"
        bin_dir.mkdir(parents=True, exist_ok=True)
        script = bin_dir / name
        args_file = bin_dir / "args.txt"
        script.write_text(
            "#!/bin/sh\n"
            f'printf \'%s\\n\' "$#" "$@" > "{args_file}"\n'
            f"printf '%b' '{stdout}'\n"
            f"printf '%b' '{stderr}' >&2\n"
            f"exit {exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a snapshot document to ``tmp_path`` and return its path."""

    def _write(content: str, name: str = "snapshot.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
