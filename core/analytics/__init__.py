"""
Analytics package exports.
"""

from core.analytics.metrics import (
    activity_level,
    build_activity_series,
    build_day_index,
    compute_activity_levels,
    compute_current_streak,
    compute_masteries_daily,
)
from core.analytics.service import build_list_activity
from core.analytics.types import ListActivityData

__all__ = [
    "activity_level",
    "build_activity_series",
    "build_day_index",
    "build_list_activity",
    "compute_activity_levels",
    "compute_current_streak",
    "compute_masteries_daily",
    "ListActivityData",
]
