"""Scope planning: turn command-line options into git queries.

Contains:
- Options: The parsed, immutable request
- staged_query, unstaged_query, last_commit_query, since_query: Query builders
- plan_queries: Build the ordered list of queries for a request
- DEFAULT_SINCE_REF: Revision diffed against when no --since is given
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from changedfiles.git.query import ChangeQuery, PatternFilter

logger = logging.getLogger(__name__)


# Parent of the current head commit
DEFAULT_SINCE_REF = "HEAD~1"


@dataclass(frozen=True)
class Options:
    """Which scopes to report and how to present them."""

    last_commit: bool = False
    with_ancestor: bool = False
    changed_since: Optional[str] = None
    folder_mode: bool = False
    filter_pattern: Optional[str] = None
    command_prefix: Optional[str] = None

    @property
    def has_history_scope(self) -> bool:
        """True when any scope beyond the working copy was requested."""
        return self.last_commit or self.with_ancestor or self.changed_since is not None


def staged_query(working_dir: Path, pattern_filter: PatternFilter) -> ChangeQuery:
    """Files staged for the next commit."""
    return ChangeQuery(
        name="staged",
        working_dir=working_dir,
        args=("diff", "--name-only", "--cached"),
        pattern_filter=pattern_filter,
    )


def unstaged_query(working_dir: Path, pattern_filter: PatternFilter) -> ChangeQuery:
    """Modified tracked files and untracked files that are not ignored."""
    return ChangeQuery(
        name="unstaged",
        working_dir=working_dir,
        args=("ls-files", "--others", "--modified", "--exclude-standard"),
        pattern_filter=pattern_filter,
    )


def last_commit_query(working_dir: Path, pattern_filter: PatternFilter) -> ChangeQuery:
    """Files touched by the most recent commit."""
    return ChangeQuery(
        name="last-commit",
        working_dir=working_dir,
        args=("show", "--name-only", "--pretty=format:", "HEAD"),
        pattern_filter=pattern_filter,
    )


def since_query(
    working_dir: Path,
    pattern_filter: PatternFilter,
    ref: Optional[str] = None,
    with_ancestor: bool = False,
) -> ChangeQuery:
    """Files differing from a revision.

    Without ``with_ancestor`` the revision is compared with the working tree.
    With it, the diff runs from the merge-base of the revision and HEAD
    through HEAD (``<ref>...HEAD``).
    """
    target = ref or DEFAULT_SINCE_REF
    if with_ancestor:
        target = f"{target}...HEAD"
    return ChangeQuery(
        name="since",
        working_dir=working_dir,
        args=("diff", "--name-only", target),
        pattern_filter=pattern_filter,
    )


def plan_queries(
    options: Options,
    working_dir: Path,
    pattern_filter: Optional[PatternFilter] = None,
) -> list[ChangeQuery]:
    """Build the ordered list of queries needed to answer a request.

    Staged and unstaged queries are always planned. When a history scope is
    requested the last-commit query (if asked for) and the since-reference
    query follow.

    Args:
        options: The parsed request.
        working_dir: Directory every query runs in.
        pattern_filter: Filter shared by all queries. Built from
            ``options.filter_pattern`` when not given.

    Returns:
        Two to four queries.

    Raises:
        InvalidPatternError: If the filter pattern does not compile.
    """
    if pattern_filter is None:
        pattern_filter = PatternFilter(options.filter_pattern)

    queries = [
        staged_query(working_dir, pattern_filter),
        unstaged_query(working_dir, pattern_filter),
    ]

    if options.has_history_scope:
        if options.last_commit:
            queries.append(last_commit_query(working_dir, pattern_filter))
        queries.append(
            since_query(
                working_dir,
                pattern_filter,
                ref=options.changed_since,
                with_ancestor=options.with_ancestor,
            )
        )

    logger.debug("Planned queries: %s", ", ".join(q.name for q in queries))
    return queries
