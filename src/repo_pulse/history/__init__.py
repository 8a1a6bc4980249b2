"""Commit history aggregation: contributor totals, daily activity, contributor list."""

from .aggregator import HistoryAggregator, aggregate
from .filters import is_included
from .frequency import (
    ActivitySummary,
    FrequencyDistribution,
    frequency_distribution,
    summarize_activity,
)
from .git_extractor import GitLogExtractor
from .models import (
    CommitRecord,
    ContributorStats,
    DailyActivity,
    FileChange,
    RepoStats,
    StatsFilter,
)
from .timeline import fill_date_range

__all__ = [
    "CommitRecord",
    "FileChange",
    "StatsFilter",
    "ContributorStats",
    "DailyActivity",
    "RepoStats",
    "HistoryAggregator",
    "GitLogExtractor",
    "ActivitySummary",
    "FrequencyDistribution",
    "aggregate",
    "is_included",
    "fill_date_range",
    "frequency_distribution",
    "summarize_activity",
]
