"""
Progress persistence (per-list daily counters).

Quick start:
    from core import progress_db

    progress_db.init_db()
    progress_db.increment_daily_count("list-1", "2024-05-01")
"""

from core.progress_db.database import (
    delete_daily_counts,
    dispose_engine,
    get_daily_count,
    get_daily_counts,
    get_database_url,
    increment_daily_count,
    init_db,
    is_test_mode,
    reset_db,
)
from core.progress_db.models import DailyCount

__all__ = [
    "DailyCount",
    "delete_daily_counts",
    "dispose_engine",
    "get_daily_count",
    "get_daily_counts",
    "get_database_url",
    "increment_daily_count",
    "init_db",
    "is_test_mode",
    "reset_db",
]
