"""Data models for commit history aggregation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import InvalidFilterError

# Filter bounds must at least start with a calendar date
_DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class FileChange:
    path: str
    insertions: Optional[int]  # None for binary files (numstat "-")
    deletions: Optional[int]

    @property
    def is_binary(self) -> bool:
        return self.insertions is None or self.deletions is None


@dataclass
class CommitRecord:
    author_name: str
    timestamp: str  # ISO-8601; only the leading YYYY-MM-DD is used as the day
    file_changes: Optional[list[FileChange]] = None  # None = no structured numstat
    body: str = ""  # raw "added\tdeleted\tpath" lines, fallback only
    hash: str = ""
    author_email: str = ""
    subject: str = ""

    @property
    def day(self) -> str:
        return self.timestamp[:10]


@dataclass(frozen=True)
class StatsFilter:
    """Optional author and inclusive date-range constraints.

    Dates are compared as strings against the full commit timestamp, so an
    ``end_date`` without a time component means "start of that day".
    """

    start_date: Optional[str] = None
    end_date: Optional[str] = None
    author: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("start_date", "end_date"):
            value = getattr(self, name)
            if value is not None and not _DATE_PREFIX_RE.match(value):
                raise InvalidFilterError(name, value, "expected YYYY-MM-DD")

    @property
    def is_empty(self) -> bool:
        return self.start_date is None and self.end_date is None and self.author is None


@dataclass
class ContributorStats:
    commits: int = 0
    lines_added: int = 0
    lines_deleted: int = 0
    files_changed: int = 0

    @property
    def net_contribution(self) -> int:
        return self.lines_added - self.lines_deleted


@dataclass(frozen=True)
class DailyActivity:
    date: str  # YYYY-MM-DD
    count: int


@dataclass
class RepoStats:
    total_commits: int = 0
    contributors: dict[str, ContributorStats] = field(default_factory=dict)
    commit_activity: list[DailyActivity] = field(default_factory=list)
    all_contributors: list[str] = field(default_factory=list)  # unfiltered, sorted
