"""Serialization of RepoStats: plain JSON-ready dicts and CSV tables."""

from __future__ import annotations

import csv
import io
from typing import Any

from .history.models import RepoStats

CONTRIBUTOR_COLUMNS = [
    "contributor",
    "commits",
    "lines_added",
    "lines_deleted",
    "net_contribution",
    "files_changed",
]
ACTIVITY_COLUMNS = ["date", "count"]


def stats_to_dict(stats: RepoStats) -> dict[str, Any]:
    """Camel-cased document matching the dashboard's ``/api/stats`` contract."""
    return {
        "totalCommits": stats.total_commits,
        "contributors": {
            name: {
                "commits": c.commits,
                "linesAdded": c.lines_added,
                "linesDeleted": c.lines_deleted,
                "filesChanged": c.files_changed,
            }
            for name, c in stats.contributors.items()
        },
        "commitActivity": [{"date": a.date, "count": a.count} for a in stats.commit_activity],
        "allContributors": list(stats.all_contributors),
    }


def contributors_to_csv(stats: RepoStats) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CONTRIBUTOR_COLUMNS)
    for name in sorted(stats.contributors):
        c = stats.contributors[name]
        writer.writerow(
            [name, c.commits, c.lines_added, c.lines_deleted, c.net_contribution, c.files_changed]
        )
    return buf.getvalue()


def activity_to_csv(stats: RepoStats) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(ACTIVITY_COLUMNS)
    for a in stats.commit_activity:
        writer.writerow([a.date, a.count])
    return buf.getvalue()


CSV_EXPORTERS = {
    "contributors": contributors_to_csv,
    "activity": activity_to_csv,
}


def to_csv(stats: RepoStats, kind: str) -> str:
    """Render the ``contributors`` or ``activity`` table as CSV text."""
    try:
        exporter = CSV_EXPORTERS[kind]
    except KeyError:
        raise ValueError(f"Unknown CSV export kind {kind!r} (expected one of {sorted(CSV_EXPORTERS)})")
    return exporter(stats)
