"""
Service layer to assemble a list's activity dashboard.
"""

from __future__ import annotations

from typing import Mapping

from core.analytics.constants import HEATMAP_DAYS
from core.analytics.metrics import (
    build_activity_series,
    build_day_index,
    compute_activity_levels,
    compute_current_streak,
    compute_masteries_daily,
)
from core.analytics.types import ListActivityData
from core.progress import ReferenceCalendar, summarize_list
from core.scheduling.models import WordList


def build_list_activity(
    word_list: WordList,
    daily_counts: Mapping[str, int],
    now: int,
    calendar: ReferenceCalendar,
    days: int = HEATMAP_DAYS
) -> ListActivityData:
    """
    Build all counters and series needed by a list's dashboard.

    Args:
        word_list: Current list snapshot
        daily_counts: Persisted {"YYYY-MM-DD": count} for this list
        now: Current time (epoch ms)
        calendar: Reference calendar defining day boundaries
        days: Heatmap window length
    """
    today = calendar.day_of(now)
    day_index = build_day_index(today, days)
    activity = build_activity_series(daily_counts, today, days)

    all_masteries = [ts for word in word_list.words for ts in word.mastered_dates]

    return ListActivityData(
        list_id=word_list.id,
        today=today.isoformat(),
        today_count=int(daily_counts.get(today.isoformat(), 0)),
        summary=summarize_list(word_list, now),
        daily_cards=activity,
        daily_levels=compute_activity_levels(activity),
        masteries_daily=compute_masteries_daily(all_masteries, calendar, day_index),
        current_streak_days=compute_current_streak(activity),
    )
