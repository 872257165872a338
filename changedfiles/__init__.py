"""Report the files changed in a git working copy."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("changedfiles")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
