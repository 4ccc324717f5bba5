"""Command line interface for cibox."""

from cibox.cli.app import app, main
from cibox.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]
