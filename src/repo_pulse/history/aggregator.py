"""Single-pass aggregation of commit records into a RepoStats report."""

from __future__ import annotations

from typing import Iterable, Optional

from ..logging_config import get_logger
from .accumulators import ActivityAccumulator, ContributorAccumulator
from .filters import is_included
from .models import CommitRecord, RepoStats, StatsFilter
from .timeline import fill_date_range

logger = get_logger(__name__)


class HistoryAggregator:
    """Drive both accumulators over one commit sequence.

    An instance owns its accumulator state for exactly one ``run()``; use
    :func:`aggregate` unless you need the intermediate counters.
    """

    def __init__(self, filters: Optional[StatsFilter] = None):
        self.filters = filters
        self.contributors = ContributorAccumulator()
        self.activity = ActivityAccumulator()
        self.seen_authors: set[str] = set()
        self.total_commits = 0
        self._consumed = False

    def run(self, commits: Iterable[CommitRecord]) -> RepoStats:
        if self._consumed:
            raise RuntimeError("HistoryAggregator.run() may only be called once")
        self._consumed = True

        seen = 0
        for commit in commits:
            seen += 1
            # Collected before filtering so filter UIs can pivot to anyone
            self.seen_authors.add(commit.author_name)

            if not is_included(commit, self.filters):
                continue

            self.total_commits += 1
            self.contributors.add(commit)
            self.activity.add(commit)

        logger.debug(
            "Aggregated %d of %d commits (%d authors, %d malformed numstat lines skipped)",
            self.total_commits,
            seen,
            len(self.seen_authors),
            self.contributors.skipped_lines,
        )

        return RepoStats(
            total_commits=self.total_commits,
            contributors=self.contributors.finalize(),
            commit_activity=fill_date_range(self.activity.counts),
            all_contributors=sorted(self.seen_authors),
        )


def aggregate(
    commits: Iterable[CommitRecord], filters: Optional[StatsFilter] = None
) -> RepoStats:
    """Build per-contributor totals, the daily activity series and the author list."""
    return HistoryAggregator(filters).run(commits)
