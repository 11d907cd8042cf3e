"""Main CLI application for phpflags."""

import logging
import sys
from importlib.metadata import PackageNotFoundError, distribution
from typing import Annotated

import typer

from phpflags.cli.decorators.error_handling import print_stack_trace_if_verbose
from phpflags.core.logging import setup_logging


__all__ = ["app", "main", "__version__"]


try:
    __version__ = distribution("phpflags").version
except PackageNotFoundError:
    __version__ = "unknown"

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(self, verbose: int = 0, log_file: str | None = None) -> None:
        self.verbose = verbose
        self.log_file = log_file


app = typer.Typer(
    name="phpflags",
    help=f"""phpflags v{__version__}

Discover the compiler flags needed to build a native PHP extension.

Flags come from php-config (located through PHP_CONFIG or PATH) or from a
snapshot when php-config cannot run, e.g. when cross-compiling:

  • From php-config:   phpflags flags
  • From a snapshot:   phpflags flags --snapshot php-build.yaml
  • From environment:  PHPFLAGS_INCLUDES=/a,/b phpflags includes --from-env""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """phpflags: PHP extension build flag discovery."""
    if version:
        typer.echo(f"phpflags v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    ctx.obj = AppContext(verbose=verbose, log_file=log_file)

    log_level = logging.WARNING
    if debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO

    setup_logging(level=log_level, log_file=log_file)


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0

    try:
        app()
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
