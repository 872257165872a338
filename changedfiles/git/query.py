"""Change queries: one git invocation plus an optional line filter.

Contains:
- PatternFilter: Optional regular expression a line must match
- ChangeQuery: A git argument vector bound to a working directory and filter
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from changedfiles.git.exceptions import InvalidPatternError, PathEncodingError
from changedfiles.git.runner import run_git

logger = logging.getLogger(__name__)


class PatternFilter:
    """Accepts lines matching an optional regular expression.

    With no pattern every line is accepted. The match is unanchored, so
    ``\\.go$`` accepts ``cmd/main.go``.
    """

    def __init__(self, pattern: Optional[str] = None):
        self.pattern = pattern
        self._regex: Optional[re.Pattern] = None
        if pattern is not None:
            try:
                self._regex = re.compile(pattern)
            except re.error as e:
                raise InvalidPatternError(pattern, str(e))

    def matches(self, line: str) -> bool:
        if self._regex is None:
            return True
        return self._regex.search(line) is not None

    def __repr__(self) -> str:
        return f"PatternFilter({self.pattern!r})"


def _as_text(path: str) -> str:
    """Return path unchanged if it round-trips as UTF-8.

    Raises:
        PathEncodingError: If git printed bytes that are not valid UTF-8.
    """
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        raw = path.encode("utf-8", errors="surrogateescape")
        raise PathEncodingError(f"Path is not valid UTF-8: {raw!r}")
    return path


@dataclass(frozen=True)
class ChangeQuery:
    """A single git query whose output is a list of changed paths.

    Attributes:
        name: Scope label used in logs (staged, unstaged, ...).
        working_dir: Directory git runs in; output lines are joined onto it.
        args: Argument vector passed to git.
        pattern_filter: Filter applied to each output line.
    """

    name: str
    working_dir: Path
    args: tuple[str, ...]
    pattern_filter: PatternFilter = field(default_factory=PatternFilter)

    def execute(self) -> list[str]:
        """Run the query and return absolute paths of the accepted lines.

        Lines that git prints with invalid UTF-8 are skipped with a warning.

        Raises:
            GitError: If git cannot be run or exits with a failure status.
        """
        output = run_git(list(self.args), cwd=self.working_dir)

        paths = []
        for line in output.split("\n"):
            line = line.rstrip("\r")
            if not line or not self.pattern_filter.matches(line):
                continue
            try:
                paths.append(_as_text(str(self.working_dir / line)))
            except PathEncodingError as e:
                logger.warning("Skipping path from %s query: %s", self.name, e)

        logger.debug("%s query produced %d path(s)", self.name, len(paths))
        return paths
