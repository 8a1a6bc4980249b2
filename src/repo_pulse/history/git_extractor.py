"""Extract commit records with per-file numstat from git via subprocess."""

from __future__ import annotations

import subprocess
from pathlib import Path

from ..exceptions import (
    GitCommandError,
    GitNotFoundError,
    InvalidPathError,
    NotAGitRepositoryError,
)
from ..logging_config import get_logger
from .models import CommitRecord, FileChange

logger = get_logger(__name__)

# Record and field separators; neither can appear in names, dates or subjects
_RECORD_SEP = "\x1e"
_FIELD_SEP = "\x1f"
_FORMAT = f"--format={_RECORD_SEP}%H{_FIELD_SEP}%an{_FIELD_SEP}%ae{_FIELD_SEP}%ad{_FIELD_SEP}%s"


class GitLogExtractor:
    """Parse ``git log --numstat`` into a list of CommitRecord.

    The full history is always read; date and author filters are applied by
    the aggregator so that the contributor list stays filter-independent.
    """

    def __init__(
        self,
        repo_path: str | Path,
        max_commits: int = 0,
        timeout_seconds: int = 60,
        include_merges: bool = False,
        all_refs: bool = True,
    ):
        self.repo_path = Path(repo_path).resolve()
        self.max_commits = max_commits
        self.timeout_seconds = timeout_seconds
        self.include_merges = include_merges
        self.all_refs = all_refs

    def validate(self) -> None:
        """Raise unless repo_path is an existing directory inside a git work tree."""
        if not self.repo_path.exists():
            raise InvalidPathError(self.repo_path, "path does not exist")
        if not self.repo_path.is_dir():
            raise InvalidPathError(self.repo_path, "path is not a directory")
        if not self.is_git_repo():
            raise NotAGitRepositoryError(self.repo_path)

    def is_git_repo(self) -> bool:
        try:
            result = subprocess.run(
                ["git", "-C", str(self.repo_path), "rev-parse", "--git-dir"],
                capture_output=True,
                text=True,
                timeout=5,
            )
        except FileNotFoundError:
            raise GitNotFoundError()
        except subprocess.TimeoutExpired:
            return False
        return result.returncode == 0

    def build_command(self) -> list[str]:
        cmd = ["git", "-C", str(self.repo_path), "log"]
        if self.all_refs:
            cmd.append("--all")
        if not self.include_merges:
            cmd.append("--no-merges")
        cmd += ["--numstat", "--date=iso-strict", _FORMAT]
        if self.max_commits > 0:
            cmd.append(f"-n{self.max_commits}")
        return cmd

    def extract(self) -> list[CommitRecord]:
        self.validate()
        raw = self._run_git_log()
        commits = parse_log(raw)
        logger.info("Read %d commits from %s", len(commits), self.repo_path)
        return commits

    def _run_git_log(self) -> str:
        cmd = self.build_command()
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError:
            raise GitNotFoundError()
        except subprocess.TimeoutExpired:
            raise GitCommandError(cmd, f"timed out after {self.timeout_seconds}s")

        if result.returncode != 0:
            stderr = result.stderr.strip()
            # A repository without any commit yet is an empty history, not a failure
            if "does not have any commits" in stderr:
                return ""
            raise GitCommandError(cmd, stderr or f"exit code {result.returncode}")
        return result.stdout


def parse_numstat_entry(line: str) -> FileChange | None:
    """Parse a numstat line; binary entries (``-``) keep their path with no counts."""
    parts = line.split("\t", 2)
    if len(parts) != 3:
        return None
    added, deleted, path = parts
    if added == "-" and deleted == "-":
        return FileChange(path=path, insertions=None, deletions=None)
    try:
        return FileChange(path=path, insertions=int(added), deletions=int(deleted))
    except ValueError:
        return None


def parse_log(raw: str) -> list[CommitRecord]:
    """Parse output produced with :data:`_FORMAT` and ``--numstat``.

    Every parsed commit carries a structured (possibly empty) ``file_changes``
    list, since numstat was requested.
    """
    commits = []
    for record in raw.split(_RECORD_SEP):
        if not record.strip():
            continue
        header, _, rest = record.partition("\n")
        fields = header.split(_FIELD_SEP)
        if len(fields) != 5:
            logger.warning("Skipping malformed git log header: %r", header[:80])
            continue
        commit_hash, author_name, author_email, timestamp, subject = fields

        changes = []
        for line in rest.splitlines():
            if not line.strip():
                continue
            change = parse_numstat_entry(line)
            if change is None:
                logger.debug("Skipping unparseable numstat line in %s: %r", commit_hash[:8], line)
                continue
            changes.append(change)

        commits.append(
            CommitRecord(
                author_name=author_name,
                timestamp=timestamp,
                file_changes=changes,
                hash=commit_hash,
                author_email=author_email,
                subject=subject,
            )
        )
    return commits
