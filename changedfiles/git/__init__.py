"""Git change query module for changedfiles.

This package provides modular change collection with:
- exceptions: GitError, InvalidPatternError, PathEncodingError
- runner: run_git, get_repo_root
- query: PatternFilter, ChangeQuery
- planner: Options, plan_queries, DEFAULT_SINCE_REF
- executor: QueryResult, run_queries, merge_unique
"""

# Exceptions
from changedfiles.git.exceptions import (
    GitError,
    InvalidPatternError,
    PathEncodingError,
)

# Runner utilities
from changedfiles.git.runner import (
    run_git,
    get_repo_root,
)

# Queries
from changedfiles.git.query import (
    PatternFilter,
    ChangeQuery,
)

# Scope planning
from changedfiles.git.planner import (
    DEFAULT_SINCE_REF,
    Options,
    plan_queries,
)

# Execution and merging
from changedfiles.git.executor import (
    QueryResult,
    run_queries,
    merge_unique,
)


__all__ = [
    # Exceptions
    "GitError",
    "InvalidPatternError",
    "PathEncodingError",
    # Runner
    "run_git",
    "get_repo_root",
    # Query
    "PatternFilter",
    "ChangeQuery",
    # Planner
    "DEFAULT_SINCE_REF",
    "Options",
    "plan_queries",
    # Executor
    "QueryResult",
    "run_queries",
    "merge_unique",
]
