"""Build listing and preparation commands."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from cibox.cli.app import AppContext
from cibox.cli.decorators import handle_errors
from cibox.core.errors import BuildError, StrategyNotFoundError
from cibox.models.build import Build
from cibox.strategies.factory import create_strategy_factory


logger = logging.getLogger(__name__)

DirectoryArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Project directory",
    ),
]


def _print_builds_table(builds: list[Build]) -> None:
    console = Console()
    table = Table(title="Builds", show_header=True, header_style="bold cyan")
    table.add_column("Strategy", style="cyan", no_wrap=True)
    table.add_column("Key", style="bold", no_wrap=True)
    table.add_column("Description")

    for build in builds:
        table.add_row(build.strategy_name, build.unique_key, build.description)

    console.print(table)


def _select_builds(
    builds: list[Build],
    keys: list[str],
    strategy: str | None,
    available_strategies: list[str],
) -> list[Build]:
    if strategy is not None and strategy not in available_strategies:
        raise StrategyNotFoundError(strategy, available_strategies)

    if keys:
        unknown = sorted(set(keys) - {build.unique_key for build in builds})
        if unknown:
            raise BuildError(
                f"Unknown build key(s): {', '.join(unknown)}",
                {"unknown_keys": unknown},
            )

    return [
        build
        for build in builds
        if (not keys or build.unique_key in keys)
        and (strategy is None or build.strategy_name == strategy)
    ]


@handle_errors
def list_builds(
    ctx: typer.Context,
    directory: DirectoryArgument = Path("."),
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table or json"),
    ] = "table",
    timezone: Annotated[
        str | None,
        typer.Option("--timezone", help="Timezone bound into each build"),
    ] = None,
) -> None:
    """List the builds of a project's CI matrix."""
    app_ctx: AppContext = ctx.obj
    factory = create_strategy_factory(app_ctx.settings)
    builds = factory.get_builds(directory, timezone=timezone)

    if output_format == "json":
        typer.echo(json.dumps([build.to_dict() for build in builds], indent=2))
    else:
        _print_builds_table(builds)


@handle_errors
def prepare(
    ctx: typer.Context,
    directory: DirectoryArgument = Path("."),
    keys: Annotated[
        list[str] | None,
        typer.Option("--key", "-k", help="Only prepare the build with this key"),
    ] = None,
    strategy: Annotated[
        str | None,
        typer.Option("--strategy", "-s", help="Only prepare builds of this strategy"),
    ] = None,
    timezone: Annotated[
        str | None,
        typer.Option("--timezone", help="Timezone bound into each build"),
    ] = None,
) -> None:
    """Prepare build contexts (mirrored sources and Dockerfile)."""
    app_ctx: AppContext = ctx.obj
    factory = create_strategy_factory(app_ctx.settings)
    builds = _select_builds(
        factory.get_builds(directory, timezone=timezone),
        keys or [],
        strategy,
        factory.list_strategies(),
    )

    console = Console()
    for build in builds:
        target = factory.prepare_build(build)
        console.print(
            f"[green]Prepared[/green] {build.description} "
            f"[dim]({build.unique_key})[/dim] -> {target}"
        )

    logger.info("Prepared %d builds", len(builds))


def register_commands(app: typer.Typer) -> None:
    """Register build commands with the main app."""
    app.command(name="builds")(list_builds)
    app.command(name="prepare")(prepare)
