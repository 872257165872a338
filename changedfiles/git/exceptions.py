"""Git-related exception classes.

Contains all exception classes for change queries:
- GitError: Base exception for git-related errors
- InvalidPatternError: Raised when a filter pattern does not compile
- PathEncodingError: Raised when git prints a path that is not valid text
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class InvalidPatternError(GitError):
    """Raised when a filter pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid filter pattern {pattern!r}: {reason}")


class PathEncodingError(GitError):
    """Raised when a path reported by git cannot be represented as text."""

    pass
