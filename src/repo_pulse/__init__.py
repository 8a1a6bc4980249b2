"""
repo-pulse - Commit history statistics for git repositories

Aggregates a repository's commit log into per-contributor totals, a
gap-filled daily activity series and the list of every known contributor,
under optional author and date-range filters.
"""

__version__ = "0.1.0"

from .api import collect_stats
from .history import CommitRecord, FileChange, RepoStats, StatsFilter, aggregate

__all__ = [
    "collect_stats",  # Read git history and aggregate
    "aggregate",  # Aggregate already-parsed commit records
    "CommitRecord",
    "FileChange",
    "StatsFilter",
    "RepoStats",
]
