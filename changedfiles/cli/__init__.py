"""CLI entry point for changedfiles.

Provides the ``cf`` application: a single command that prints the changed
files of the current working copy.
"""

import typer

from changedfiles.cli.main import main_command

app = typer.Typer(
    name="cf",
    help="cf: list files changed in a git working copy",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "main_command",
]
