"""Commit-frequency distribution and descriptive statistics of the daily series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .models import DailyActivity


@dataclass(frozen=True)
class FrequencyDistribution:
    """Number of days falling in each commits-per-day bucket."""

    zero: int = 0
    one_to_two: int = 0
    three_to_five: int = 0
    six_plus: int = 0

    def as_rows(self) -> list[tuple[str, int]]:
        return [
            ("0 commits", self.zero),
            ("1-2 commits", self.one_to_two),
            ("3-5 commits", self.three_to_five),
            ("6+ commits", self.six_plus),
        ]


@dataclass(frozen=True)
class ActivitySummary:
    days: int = 0
    active_days: int = 0
    mean_per_day: float = 0.0
    median_per_day: float = 0.0
    max_per_day: int = 0
    busiest_day: Optional[str] = None
    longest_streak: int = 0  # consecutive days with at least one commit


def _counts(activity: Sequence[DailyActivity]) -> np.ndarray:
    return np.fromiter((a.count for a in activity), dtype=np.int64, count=len(activity))


def frequency_distribution(activity: Sequence[DailyActivity]) -> FrequencyDistribution:
    counts = _counts(activity)
    return FrequencyDistribution(
        zero=int(np.count_nonzero(counts == 0)),
        one_to_two=int(np.count_nonzero((counts >= 1) & (counts <= 2))),
        three_to_five=int(np.count_nonzero((counts >= 3) & (counts <= 5))),
        six_plus=int(np.count_nonzero(counts >= 6)),
    )


def _longest_run(active: np.ndarray) -> int:
    """Length of the longest run of True values."""
    if not active.any():
        return 0
    # Pad with False so every run has a rising and a falling edge
    edges = np.diff(np.concatenate(([0], active.astype(np.int8), [0])))
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)
    return int((ends - starts).max())


def summarize_activity(activity: Sequence[DailyActivity]) -> ActivitySummary:
    """Summarize a contiguous daily series. Empty input yields all zeros."""
    if not activity:
        return ActivitySummary()

    counts = _counts(activity)
    peak = int(np.argmax(counts))  # first occurrence on ties
    return ActivitySummary(
        days=len(activity),
        active_days=int(np.count_nonzero(counts)),
        mean_per_day=float(counts.mean()),
        median_per_day=float(np.median(counts)),
        max_per_day=int(counts[peak]),
        busiest_day=activity[peak].date,
        longest_streak=_longest_run(counts > 0),
    )
