"""Error handling decorators for CLI commands."""

import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from cibox.core.errors import (
    BuildError,
    CiboxError,
    ConfigError,
    FileSystemError,
    StrategyNotFoundError,
    TemplateError,
)
from cibox.core.structlog_logger import get_struct_logger, traceback_enabled


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    Known errors are reported on stderr and the command exits with status 1.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ConfigError as e:
            _report("configuration_error", e)
            raise typer.Exit(1) from e
        except StrategyNotFoundError as e:
            _report("strategy_not_found", e)
            raise typer.Exit(1) from e
        except TemplateError as e:
            _report("template_error", e)
            raise typer.Exit(1) from e
        except FileSystemError as e:
            _report("filesystem_error", e)
            raise typer.Exit(1) from e
        except BuildError as e:
            _report("build_error", e)
            raise typer.Exit(1) from e
        except CiboxError as e:
            _report("cibox_error", e)
            raise typer.Exit(1) from e
        except Exception as e:
            exc_info = traceback_enabled(logger)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            typer.echo(f"Error: {e}", err=True)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def _report(event: str, error: CiboxError) -> None:
    logger.error(event, error=str(error), **error.context)
    typer.echo(f"Error: {error}", err=True)
    print_stack_trace_if_verbose()


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
