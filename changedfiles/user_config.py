"""Repository configuration for changedfiles.

Handles reading the optional .changedfiles.yaml file at the repository root.
Values in the file act as defaults; command-line flags override them.

Example .changedfiles.yaml:

    filter: '\\.py$'
    folder: false
    since: origin/main
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError


CONFIG_FILE_NAME = ".changedfiles.yaml"


class UserConfigError(Exception):
    """Raised when the repository configuration file is malformed."""

    pass


class RepoConfig(BaseModel):
    """Per-repository defaults for command-line options."""

    model_config = ConfigDict(extra="forbid")

    filter: Optional[str] = None
    folder: bool = False
    since: Optional[str] = None


def get_config_file(repo_root: Path) -> Path:
    """Return path to the .changedfiles.yaml file.

    Args:
        repo_root: The root directory of the git repository.
    """
    return repo_root / CONFIG_FILE_NAME


def load_config(repo_root: Path) -> RepoConfig:
    """Load the repository configuration.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        The parsed configuration, or defaults if the file doesn't exist.

    Raises:
        UserConfigError: If the file cannot be read or has invalid content.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return RepoConfig()

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise UserConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(data, dict):
        raise UserConfigError(f"Invalid config in {config_file}: expected a mapping")

    try:
        return RepoConfig.model_validate(data)
    except ValidationError as e:
        raise UserConfigError(f"Invalid config in {config_file}: {e}")
