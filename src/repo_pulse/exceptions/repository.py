"""Repository access exceptions: git binary, repository detection, log failures."""

from pathlib import Path
from typing import List

from .base import RepoPulseError


class RepositoryError(RepoPulseError):
    """Base class for errors raised while reading a repository."""

    pass


class NotAGitRepositoryError(RepositoryError):
    """Raised when the target directory is not inside a git work tree."""

    def __init__(self, path: Path):
        super().__init__(
            f"Not a valid Git repository: {path}",
            details={"path": str(path)},
        )
        self.path = path


class GitNotFoundError(RepositoryError):
    """Raised when the git executable is not on PATH."""

    def __init__(self):
        super().__init__("git executable not found", details={"hint": "install git"})


class GitCommandError(RepositoryError):
    """Raised when a git subprocess fails or times out."""

    def __init__(self, command: List[str], reason: str):
        super().__init__(
            f"git command failed: {' '.join(command)}",
            details={"reason": reason},
        )
        self.command = command
        self.reason = reason
