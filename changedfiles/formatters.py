"""Output formatting for the changed-file list."""

from typing import Iterable, Optional


def to_folder(path: str) -> str:
    """Strip the final path segment, keeping the trailing separator.

    Args:
        path: An absolute file path.

    Returns:
        The containing directory ending in ``/``, or ``""`` when the path
        has no separator.

    Example:
        ``/repo/src/a.go`` -> ``/repo/src/``, ``/repo/src/`` -> ``/repo/src/``
    """
    return path[: path.rfind("/") + 1]


def collapse_to_folders(paths: Iterable[str]) -> list[str]:
    """Replace each path by its folder, dropping repeated folders."""
    folders = []
    seen = set()
    for path in paths:
        folder = to_folder(path)
        if folder not in seen:
            seen.add(folder)
            folders.append(folder)
    return folders


def format_output(paths: list[str], command_prefix: Optional[str] = None) -> str:
    """Join paths with single spaces, optionally after a command prefix.

    Args:
        paths: Paths to print.
        command_prefix: Token placed before the list (e.g. ``eslint``).

    Returns:
        ``"<prefix> <paths>"`` or the bare joined list. The prefix is kept
        even when there are no paths.
    """
    joined = " ".join(paths)
    if command_prefix:
        return f"{command_prefix} {joined}"
    return joined
