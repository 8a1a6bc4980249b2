"""Commit inclusion predicate for author and date-range filters."""

from __future__ import annotations

from typing import Optional

from .models import CommitRecord, StatsFilter


def is_included(commit: CommitRecord, filters: Optional[StatsFilter] = None) -> bool:
    """Return True if *commit* passes every constraint set on *filters*.

    Author matching is exact and case-sensitive. Date bounds are inclusive
    and compared lexicographically against the full ISO timestamp, so
    ``end_date="2024-01-02"`` excludes a commit at ``2024-01-02T10:00``.
    """
    if filters is None:
        return True
    if filters.author is not None and commit.author_name != filters.author:
        return False
    if filters.start_date is not None and commit.timestamp < filters.start_date:
        return False
    if filters.end_date is not None and commit.timestamp > filters.end_date:
        return False
    return True
