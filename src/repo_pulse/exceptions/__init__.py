"""Exception hierarchy for repo-pulse."""

from .base import RepoPulseError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError
from .history import HistoryError, InvalidFilterError, InvalidTimestampError
from .repository import (
    GitCommandError,
    GitNotFoundError,
    NotAGitRepositoryError,
    RepositoryError,
)

__all__ = [
    "RepoPulseError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPathError",
    "RepositoryError",
    "NotAGitRepositoryError",
    "GitNotFoundError",
    "GitCommandError",
    "HistoryError",
    "InvalidTimestampError",
    "InvalidFilterError",
]
