"""Main CLI application for cibox."""

import logging
from importlib.metadata import distribution
from typing import Annotated

import typer

from cibox.cli.decorators.error_handling import print_stack_trace_if_verbose
from cibox.config.settings import CiboxSettings, load_settings
from cibox.core.errors import ConfigError
from cibox.core.logging import setup_logging


__all__ = ["app", "main", "__version__", "AppContext"]


__version__ = distribution("cibox").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        settings: CiboxSettings,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
    ):
        self.settings = settings
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file


app = typer.Typer(
    name="cibox",
    help=f"""cibox v{__version__}

Expand a project's CI configuration into one container build per matrix cell
and prepare ready-to-build contexts.

Common workflows:
  • List builds:     cibox builds path/to/project
  • Prepare builds:  cibox prepare path/to/project --key 3f2a9c1d0b7e4a56""",
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
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to settings file"),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """cibox CI matrix build tool."""
    if version:
        print(f"cibox v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    try:
        settings = load_settings(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    log_level_name = settings.log_level
    if debug or verbose >= 2:
        log_level_name = "DEBUG"
    elif verbose == 1:
        log_level_name = "INFO"

    setup_logging(log_level_name=log_level_name, log_file=log_file)

    ctx.obj = AppContext(
        settings=settings,
        verbose=verbose,
        log_file=log_file,
        config_file=config_file,
    )


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

