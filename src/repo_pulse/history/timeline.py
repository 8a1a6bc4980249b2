"""Turn sparse per-day commit counts into a contiguous daily series."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Mapping

from ..exceptions import InvalidTimestampError
from .models import DailyActivity


def _parse_day(day: str) -> date:
    try:
        return date.fromisoformat(day)
    except ValueError:
        raise InvalidTimestampError(day) from None


def fill_date_range(counts: Mapping[str, int]) -> list[DailyActivity]:
    """Return one entry per calendar day between the first and last observed day.

    Days without commits get an explicit zero. An empty mapping yields an
    empty series: days are only synthesized between observed days, never
    from filter bounds.
    """
    if not counts:
        return []

    by_day = {_parse_day(key): count for key, count in counts.items()}
    first = min(by_day)
    last = max(by_day)

    series = []
    current = first
    while current <= last:
        series.append(DailyActivity(date=current.isoformat(), count=by_day.get(current, 0)))
        current += timedelta(days=1)

    series.sort(key=lambda a: a.date)
    return series
