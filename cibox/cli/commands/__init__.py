"""CLI command modules."""

import typer

from cibox.cli.commands.builds import register_commands as register_builds_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_builds_commands(app)
