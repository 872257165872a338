"""Main CLI command for listing changed files."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from changedfiles import __version__
from changedfiles.formatters import collapse_to_folders, format_output
from changedfiles.git import (
    GitError,
    InvalidPatternError,
    Options,
    PatternFilter,
    get_repo_root,
    merge_unique,
    plan_queries,
    run_queries,
)
from changedfiles.user_config import UserConfigError, load_config

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cf {__version__}")
        raise typer.Exit(0)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _resolve_working_dir(directory: Path) -> Path:
    """Return the repository root, or the directory itself outside a repo."""
    try:
        return get_repo_root(directory)
    except GitError as e:
        logger.debug("Using %s as working directory: %s", directory, e)
        return directory


def main_command(
    command: Optional[str] = typer.Argument(
        None,
        help="Command prefix printed before the file list (e.g. eslint)",
    ),
    last_commit: bool = typer.Option(
        False,
        "--last-commit",
        "-l",
        help="Include files changed by the last commit",
    ),
    with_ancestor: bool = typer.Option(
        False,
        "--with-ancestor",
        "-w",
        help="Diff from the merge-base of the reference and HEAD",
    ),
    since: Optional[str] = typer.Option(
        None,
        "--since",
        "-s",
        help="Include files changed since this revision",
    ),
    folder: Optional[bool] = typer.Option(
        None,
        "--folder/--no-folder",
        help="Print the containing folder of each file",
        show_default=False,
    ),
    filter_pattern: Optional[str] = typer.Option(
        None,
        "--filter",
        "-f",
        help="Keep only paths matching this regular expression",
    ),
    directory: Path = typer.Option(
        Path("."),
        "--directory",
        "-C",
        exists=True,
        file_okay=False,
        help="Run as if started in this directory",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log git invocations to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Print the files changed in the current git working copy."""
    _configure_logging(verbose)

    working_dir = _resolve_working_dir(directory.resolve())

    try:
        config = load_config(working_dir)
    except UserConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    # Flags take precedence over the repository config file
    changed_since = since
    if changed_since is None and (last_commit or with_ancestor):
        changed_since = config.since

    options = Options(
        last_commit=last_commit,
        with_ancestor=with_ancestor,
        changed_since=changed_since,
        folder_mode=folder if folder is not None else config.folder,
        filter_pattern=filter_pattern if filter_pattern is not None else config.filter,
        command_prefix=command,
    )
    logger.debug("Options: %s", options)

    try:
        pattern_filter = PatternFilter(options.filter_pattern)
    except InvalidPatternError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    queries = plan_queries(options, working_dir, pattern_filter)
    results = run_queries(queries)

    for result in results:
        if not result.ok:
            typer.echo(f"run error {result.error}")

    paths = merge_unique(result.paths for result in results)
    if options.folder_mode:
        paths = collapse_to_folders(paths)

    typer.echo(format_output(paths, options.command_prefix))

    if not any(result.ok for result in results):
        raise typer.Exit(1)
