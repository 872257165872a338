"""Git command runner and repository utilities.

Contains:
- run_git: Run a git command in a working directory and return its output
- get_repo_root: Get the root directory of the git repository containing a path
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from changedfiles.git.exceptions import GitError

logger = logging.getLogger(__name__)

# Print non-ASCII paths verbatim instead of C-quoted
GIT_COMMAND = ["git", "-c", "core.quotePath=false"]


def run_git(args: list[str], cwd: Optional[Path] = None) -> str:
    """Run a git command and return its output.

    The diagnostic stream of git is discarded. Output that is not valid UTF-8
    is kept as surrogate escapes so callers can decide what to do with it.

    Args:
        args: List of arguments to pass to git.
        cwd: Working directory for the command (defaults to the process cwd).

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails or git cannot be started.
    """
    logger.debug("Running git %s in %s", " ".join(args), cwd or ".")
    try:
        result = subprocess.run(
            GIT_COMMAND + list(args),
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            check=True,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        raise GitError(
            f"Git command failed: git {' '.join(args)} (exit status {e.returncode})"
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except OSError as e:
        raise GitError(f"Could not run git {' '.join(args)}: {e}")


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Get the root directory of the git repository.

    Args:
        cwd: Directory to start from (defaults to the process cwd).

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = run_git(["rev-parse", "--show-toplevel"], cwd=cwd).strip()
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
    if not root:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
    return Path(root)
