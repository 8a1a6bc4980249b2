"""Running per-author and per-day folds over included commits."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .models import CommitRecord, ContributorStats


@dataclass
class _ContributorTotals:
    commits: int = 0
    lines_added: int = 0
    lines_deleted: int = 0
    paths: set[str] = field(default_factory=set)


def parse_numstat_line(line: str) -> Optional[tuple[int, int, str]]:
    """Parse one ``added<TAB>deleted<TAB>path`` line.

    Returns None for anything that is not exactly three fields with integer
    counts, which includes binary entries (``-<TAB>-<TAB>path``).
    """
    parts = line.split("\t")
    if len(parts) != 3:
        return None
    try:
        added = int(parts[0])
        deleted = int(parts[1])
    except ValueError:
        return None
    if added < 0 or deleted < 0:
        return None
    return added, deleted, parts[2]


def iter_numstat_body(body: str) -> Iterator[Optional[tuple[int, int, str]]]:
    """Yield a parsed entry (or None when malformed) per non-blank body line."""
    for line in body.strip().split("\n"):
        if line.strip():
            yield parse_numstat_line(line.rstrip("\r"))


class ContributorAccumulator:
    """Fold included commits into per-author line and file totals.

    A path counts toward ``files_changed`` only when it contributed numeric
    line counts, whether it arrived as a structured ``FileChange`` or as a
    fallback body line. Binary entries are excluded from both.
    """

    def __init__(self) -> None:
        self._totals: dict[str, _ContributorTotals] = {}
        self.skipped_lines = 0

    def add(self, commit: CommitRecord) -> None:
        totals = self._totals.get(commit.author_name)
        if totals is None:
            totals = self._totals[commit.author_name] = _ContributorTotals()
        totals.commits += 1

        if commit.file_changes is not None:
            for change in commit.file_changes:
                if change.is_binary:
                    continue
                totals.lines_added += change.insertions
                totals.lines_deleted += change.deletions
                totals.paths.add(change.path)
        elif commit.body:
            for entry in iter_numstat_body(commit.body):
                if entry is None:
                    self.skipped_lines += 1
                    continue
                added, deleted, path = entry
                totals.lines_added += added
                totals.lines_deleted += deleted
                totals.paths.add(path)

    def finalize(self) -> dict[str, ContributorStats]:
        """Materialize path sets as counts. The sets never leave this class."""
        return {
            author: ContributorStats(
                commits=t.commits,
                lines_added=t.lines_added,
                lines_deleted=t.lines_deleted,
                files_changed=len(t.paths),
            )
            for author, t in self._totals.items()
        }


class ActivityAccumulator:
    """Count included commits per activity day (``timestamp[:10]``)."""

    def __init__(self) -> None:
        self.counts: Counter[str] = Counter()

    def add(self, commit: CommitRecord) -> None:
        self.counts[commit.day] += 1
