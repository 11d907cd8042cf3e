"""Tests for PhpConfigAdapter implementation."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from phpflags.adapters.php_config_adapter import (
    PhpConfigAdapter,
    create_php_config_adapter,
    decode_output,
    php_config,
)
from phpflags.core.errors import (
    ConfiguredPathNotFoundError,
    ExecutionError,
    NonZeroExitError,
    SpawnError,
)


class TestPhpConfigAdapter:
    """Test PhpConfigAdapter class."""

    def test_run_returns_stdout(self, make_php_config):
        """Test successful execution returns standard output."""
        script = make_php_config(stdout="-I/usr/include/php\\n")
        adapter = PhpConfigAdapter(locate=lambda: script)

        assert adapter.run("--includes") == "-I/usr/include/php\n"

    def test_run_passes_single_argument(self, make_php_config):
        """Test the executable receives exactly one argument."""
        script = make_php_config()
        adapter = PhpConfigAdapter(locate=lambda: script)

        adapter.run("--includes")

        args = (script.parent / "args.txt").read_text().splitlines()
        assert args == ["1", "--includes"]

    def test_run_subprocess_call(self):
        """Test the command line and capture settings."""
        adapter = PhpConfigAdapter(locate=lambda: Path("/usr/bin/php-config"))
        completed = subprocess.CompletedProcess(
            ["/usr/bin/php-config", "--includes"], 0, stdout=b"-I/x", stderr=b""
        )

        with patch("subprocess.run", return_value=completed) as mock_run:
            assert adapter.run("--includes") == "-I/x"

        mock_run.assert_called_once_with(
            ["/usr/bin/php-config", "--includes"],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )

    def test_non_zero_exit(self, make_php_config):
        """Test a failing php-config raises NonZeroExitError with both streams."""
        script = make_php_config(stdout="partial", stderr="bad flag", exit_code=3)
        adapter = PhpConfigAdapter(locate=lambda: script)

        with pytest.raises(NonZeroExitError) as exc_info:
            adapter.run("--bogus")

        error = exc_info.value
        assert error.returncode == 3
        assert error.stdout == "partial"
        assert error.stderr == "bad flag"
        assert "partial" in str(error)
        assert "bad flag" in str(error)
        assert error.command == [str(script), "--bogus"]

    def test_invalid_bytes_are_replaced(self, make_php_config):
        """Test undecodable output does not raise."""
        script = make_php_config(stdout="\\0377abc")
        adapter = PhpConfigAdapter(locate=lambda: script)

        assert adapter.run("--includes") == "�abc"

    def test_invalid_bytes_in_failure_streams(self, make_php_config):
        """Test undecodable stderr is replaced when building the error."""
        script = make_php_config(stderr="\\0376oops", exit_code=1)
        adapter = PhpConfigAdapter(locate=lambda: script)

        with pytest.raises(NonZeroExitError) as exc_info:
            adapter.run("--includes")

        assert exc_info.value.stderr == "�oops"

    def test_spawn_failure(self):
        """Test OS errors while launching raise SpawnError, not NonZeroExitError."""
        adapter = PhpConfigAdapter(locate=lambda: Path("/usr/bin/php-config"))
        os_error = FileNotFoundError(2, "No such file or directory")

        with patch("subprocess.run", side_effect=os_error):
            with pytest.raises(SpawnError) as exc_info:
                adapter.run("--includes")

        assert exc_info.value.__cause__ is os_error
        assert exc_info.value.error is os_error
        assert not isinstance(exc_info.value, NonZeroExitError)
        assert isinstance(exc_info.value, ExecutionError)

    def test_spawn_failure_permission_denied(self, tmp_path):
        """Test a non-executable file surfaces as SpawnError."""
        plain = tmp_path / "php-config"
        plain.write_text("#!/bin/sh\n")
        plain.chmod(0o644)
        adapter = PhpConfigAdapter(locate=lambda: plain)

        with pytest.raises(SpawnError) as exc_info:
            adapter.run("--includes")

        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_locate_called_on_every_run(self, make_php_config):
        """Test the executable path is resolved per invocation."""
        script = make_php_config()
        locate = Mock(return_value=script)
        adapter = PhpConfigAdapter(locate=locate)

        adapter.run("--includes")
        adapter.run("--includes")

        assert locate.call_count == 2

    def test_locator_errors_propagate(self, monkeypatch, tmp_path):
        """Test the default locator is used and its errors are not wrapped."""
        monkeypatch.setenv("PHP_CONFIG", str(tmp_path / "missing"))
        adapter = create_php_config_adapter()

        with pytest.raises(ConfiguredPathNotFoundError):
            adapter.run("--includes")


class TestModuleHelpers:
    """Test module level helpers."""

    def test_php_config_uses_override(self, make_php_config, monkeypatch):
        """Test php_config() runs the executable named by PHP_CONFIG."""
        script = make_php_config(stdout="-I/opt/php/include")
        monkeypatch.setenv("PHP_CONFIG", str(script))

        assert php_config("--includes") == "-I/opt/php/include"

    def test_decode_output_empty(self):
        """Test missing output decodes to an empty string."""
        assert decode_output(None) == ""
        assert decode_output(b"") == ""

    def test_decode_output_utf8(self):
        """Test valid UTF-8 is decoded unchanged."""
        assert decode_output("/opt/phé".encode()) == "/opt/phé"
