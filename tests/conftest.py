"""Shared test fixtures and configuration."""

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from changedfiles.git.runner import GIT_COMMAND


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def fake_git(mocker):
    """Answer git invocations from a table of canned outputs.

    Call the fixture with a dict mapping argument tuples (without the
    leading ``git``) to stdout text, and optionally a set of argument tuples
    that should fail. Unknown invocations print nothing.
    """

    def install(outputs=None, failures=()):
        outputs = outputs or {}
        failures = set(failures)

        def fake_run(cmd, **kwargs):
            args = tuple(cmd[len(GIT_COMMAND):])
            if args in failures:
                raise subprocess.CalledProcessError(128, cmd)
            result = MagicMock()
            result.stdout = outputs.get(args, "")
            result.returncode = 0
            return result

        return mocker.patch("subprocess.run", side_effect=fake_run)

    return install


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=repo,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def git_repo(temp_dir):
    """A real repository with one commit, one staged and one untracked file."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    _git(temp_dir, "init", "-q")
    (temp_dir / "base.txt").write_text("base\n")
    _git(temp_dir, "add", "base.txt")
    _git(temp_dir, "commit", "-q", "-m", "Initial commit")

    (temp_dir / "a.txt").write_text("staged\n")
    _git(temp_dir, "add", "a.txt")
    (temp_dir / "b.txt").write_text("untracked\n")
    return temp_dir


@pytest.fixture
def unicode_git_repo(git_repo):
    """git_repo plus a staged café.txt and an untracked sub/ü.txt."""
    (git_repo / "café.txt").write_text("staged\n")
    _git(git_repo, "add", "café.txt")
    (git_repo / "sub").mkdir()
    (git_repo / "sub" / "ü.txt").write_text("untracked\n")
    return git_repo
