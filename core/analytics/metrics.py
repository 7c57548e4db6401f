"""
Metric computations for activity dashboards.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Mapping

import pandas as pd

from core.analytics.constants import ACTIVITY_LEVEL_BOUNDS, HEATMAP_DAYS
from core.progress import ReferenceCalendar


def build_day_index(end_day: date, days: int = HEATMAP_DAYS) -> pd.DatetimeIndex:
    """
    Build a dense day index of `days` entries ending at end_day (inclusive).
    """
    if days <= 0:
        return pd.DatetimeIndex([])
    start = end_day - timedelta(days=days - 1)
    return pd.date_range(start=start, end=end_day, freq="D")


def build_activity_series(
    daily_counts: Mapping[str, int],
    end_day: date,
    days: int = HEATMAP_DAYS
) -> pd.Series:
    """
    Cards completed per day as a zero-filled series.

    Args:
        daily_counts: {"YYYY-MM-DD": count} as stored per list
        end_day: Last day of the window (usually today in the reference zone)
        days: Window length

    Returns:
        int64 series indexed by day
    """
    day_index = build_day_index(end_day, days)
    if len(day_index) == 0:
        return pd.Series(dtype="int64")
    if not daily_counts:
        return pd.Series(0, index=day_index, dtype="int64")

    counts = pd.Series(daily_counts, dtype="int64")
    counts.index = pd.to_datetime(counts.index, format="%Y-%m-%d")
    counts = counts.groupby(level=0).sum()
    return counts.reindex(day_index, fill_value=0).astype("int64")


def activity_level(count: int) -> int:
    """
    Heatmap intensity for a day's count.

    0 -> 0, 1-5 -> 1, 6-15 -> 2, 16-30 -> 3, more -> 4.
    """
    if count <= 0:
        return 0
    for level, bound in enumerate(ACTIVITY_LEVEL_BOUNDS, start=1):
        if count <= bound:
            return level
    return len(ACTIVITY_LEVEL_BOUNDS) + 1


def compute_activity_levels(activity: pd.Series) -> pd.Series:
    """Map a daily count series to heatmap levels."""
    if activity.empty:
        return pd.Series(dtype="int64")
    return activity.map(activity_level).astype("int64")


def compute_masteries_daily(
    mastered_dates: Iterable[int],
    calendar: ReferenceCalendar,
    day_index: pd.DatetimeIndex
) -> pd.Series:
    """
    Mastery events per reference-zone day, aligned to day_index.
    """
    if len(day_index) == 0:
        return pd.Series(dtype="int64")

    keys = [calendar.day_key(ts) for ts in mastered_dates]
    if not keys:
        return pd.Series(0, index=day_index, dtype="int64")

    per_day = pd.Series(1, index=pd.to_datetime(keys, format="%Y-%m-%d")).groupby(level=0).sum()
    return per_day.reindex(day_index, fill_value=0).astype("int64")


def compute_current_streak(activity: pd.Series) -> int:
    """
    Consecutive active days ending at the last day of the series.

    A quiet last day (today, not studied yet) does not break the streak.
    """
    if activity.empty:
        return 0
    values = list(activity.to_numpy())
    if values[-1] == 0:
        values = values[:-1]
    streak = 0
    for value in reversed(values):
        if value <= 0:
            break
        streak += 1
    return streak
