"""Shared test fixtures for repo-pulse."""

import os
import shutil
import subprocess
from typing import Optional

import pytest

from repo_pulse.history.models import CommitRecord, FileChange


def pytest_configure(config):
    """Register the git marker."""
    config.addinivalue_line("markers", "git: test needs a git executable")


def pytest_collection_modifyitems(config, items):
    """Skip git-backed tests when git is not installed."""
    if shutil.which("git") is not None:
        return
    skip_git = pytest.mark.skip(reason="git executable not found")
    for item in items:
        if "git" in item.keywords:
            item.add_marker(skip_git)


@pytest.fixture
def make_commit():
    """Factory for CommitRecord with (path, insertions, deletions) tuples."""

    def _make(
        author: str,
        timestamp: str,
        changes: Optional[list[tuple[str, Optional[int], Optional[int]]]] = None,
        body: str = "",
    ) -> CommitRecord:
        file_changes = None
        if changes is not None:
            file_changes = [FileChange(path=p, insertions=i, deletions=d) for p, i, d in changes]
        return CommitRecord(
            author_name=author,
            timestamp=timestamp,
            file_changes=file_changes,
            body=body,
        )

    return _make


@pytest.fixture
def alice_history(make_commit):
    """Two commits by Alice two days apart (10/2 then 5/0 lines)."""
    return [
        make_commit("Alice", "2024-01-01T09:00:00+00:00", [("README.md", 10, 2)]),
        make_commit("Alice", "2024-01-03T17:30:00+00:00", [("src/app.py", 5, 0)]),
    ]


def _git(repo, *args, env=None):
    subprocess.run(
        ["git", "-C", str(repo), *args],
        check=True,
        capture_output=True,
        text=True,
        env=env,
    )


@pytest.fixture
def git_repo(tmp_path):
    """A small repository: two authors, a binary file and a rename.

    Commits (author date):
        2024-03-01  Alice  add notes.txt (2 lines)
        2024-03-01  Bob    add logo.png (binary) + edit notes.txt (+1)
        2024-03-04  Alice  rename notes.txt -> docs/notes.txt
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "commit.gpgsign", "false")

    def commit(author, email, date, message):
        env = {
            "GIT_AUTHOR_NAME": author,
            "GIT_AUTHOR_EMAIL": email,
            "GIT_AUTHOR_DATE": date,
            "GIT_COMMITTER_NAME": author,
            "GIT_COMMITTER_EMAIL": email,
            "GIT_COMMITTER_DATE": date,
            "PATH": os.environ.get("PATH", ""),
            "HOME": str(tmp_path),
        }
        _git(repo, "add", "-A")
        _git(repo, "commit", "-q", "-m", message, env=env)

    (repo / "notes.txt").write_text("one\ntwo\n")
    commit("Alice", "alice@example.com", "2024-03-01T10:00:00+00:00", "add notes")

    (repo / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00binary\x00data")
    (repo / "notes.txt").write_text("one\ntwo\nthree\n")
    commit("Bob", "bob@example.com", "2024-03-01T15:00:00+00:00", "add logo")

    (repo / "docs").mkdir()
    _git(repo, "mv", "notes.txt", "docs/notes.txt")
    commit("Alice", "alice@example.com", "2024-03-04T08:00:00+00:00", "move notes")

    return repo