"""
Types for activity dashboards.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from core.progress import ListSummary


@dataclass(frozen=True)
class ListActivityData:
    """
    Precomputed counters and series for one list's dashboard.
    """
    list_id: str
    today: str
    today_count: int
    summary: ListSummary
    daily_cards: pd.Series
    daily_levels: pd.Series
    masteries_daily: pd.Series
    current_streak_days: int
