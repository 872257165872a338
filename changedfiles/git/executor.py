"""Run change queries concurrently and merge their results.

Contains:
- QueryResult: The paths (or error) produced by one query
- run_queries: Run every query in its own thread and wait for all of them
- merge_unique: Union of several path lists without duplicates
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, Optional

from changedfiles.git.exceptions import GitError
from changedfiles.git.query import ChangeQuery

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    """Outcome of a single change query.

    A failed query carries its error and an empty path list.
    """

    query: ChangeQuery
    paths: list[str] = field(default_factory=list)
    error: Optional[GitError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _run_one(query: ChangeQuery) -> QueryResult:
    try:
        return QueryResult(query=query, paths=query.execute())
    except GitError as e:
        logger.warning("%s query failed: %s", query.name, e)
        return QueryResult(query=query, error=e)


def run_queries(queries: list[ChangeQuery]) -> list[QueryResult]:
    """Run each query in its own thread and block until all have finished.

    A failing query does not affect the others; its result holds the error.

    Args:
        queries: The planned queries.

    Returns:
        One result per query, in the order the queries were given.
    """
    results: list[Optional[QueryResult]] = [None] * len(queries)

    def worker(index: int, query: ChangeQuery) -> None:
        results[index] = _run_one(query)

    threads = [
        threading.Thread(target=worker, args=(i, q), name=f"cf-{q.name}")
        for i, q in enumerate(queries)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    return results


def merge_unique(path_lists: Iterable[list[str]]) -> list[str]:
    """Concatenate path lists and drop duplicates.

    Callers must not rely on the order of the returned list.
    """
    seen = set()
    merged = []
    for paths in path_lists:
        for path in paths:
            if path not in seen:
                seen.add(path)
                merged.append(path)
    return merged
