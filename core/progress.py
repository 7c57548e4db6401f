"""
Progress counters for lists and days.

Everything here is recomputed from the current list snapshot. The only
persisted counter is the per-list daily count, which lives in the store and
is keyed by a calendar day in a fixed reference time zone.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from dotenv import load_dotenv

from core.scheduling.constants import DEFAULT_REFERENCE_UTC_OFFSET_HOURS, MS_PER_SECOND
from core.scheduling.models import WordList
from core.scheduling.queue_builder import select_review


load_dotenv()


# ---- Reference Calendar ----

def get_reference_offset_hours() -> float:
    """
    UTC offset (hours) that defines day boundaries for daily counters.

    Read from REFERENCE_UTC_OFFSET_HOURS, defaults to UTC+8.
    """
    raw = os.getenv("REFERENCE_UTC_OFFSET_HOURS")
    if raw is None or raw.strip() == "":
        return float(DEFAULT_REFERENCE_UTC_OFFSET_HOURS)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"REFERENCE_UTC_OFFSET_HOURS must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class ReferenceCalendar:
    """
    Maps timestamps to calendar days in a fixed UTC offset.

    Injected wherever a "today" is needed so tests never depend on the
    host's local time zone.
    """
    offset_hours: float = DEFAULT_REFERENCE_UTC_OFFSET_HOURS

    @classmethod
    def from_env(cls) -> ReferenceCalendar:
        return cls(offset_hours=get_reference_offset_hours())

    @property
    def tzinfo(self) -> timezone:
        return timezone(timedelta(hours=self.offset_hours))

    def day_of(self, timestamp_ms: int) -> date:
        moment = datetime.fromtimestamp(timestamp_ms / MS_PER_SECOND, tz=self.tzinfo)
        return moment.date()

    def day_key(self, timestamp_ms: int) -> str:
        """YYYY-MM-DD key for the reference-zone day containing the timestamp."""
        return self.day_of(timestamp_ms).isoformat()


def day_key(timestamp_ms: int, calendar: Optional[ReferenceCalendar] = None) -> str:
    """Convenience wrapper around ReferenceCalendar.day_key."""
    return (calendar or ReferenceCalendar()).day_key(timestamp_ms)


# ---- List Counters ----

def learned_count(word_list: WordList) -> int:
    """Words that have left the new state (queued or mastered at least once)."""
    queue_ids = word_list.queue_id_set
    return sum(
        1 for word in word_list.words
        if word.id in queue_ids or word.mastered_dates
    )


def mastered_count(word_list: WordList) -> int:
    """Words mastered at least once."""
    return sum(1 for word in word_list.words if word.mastered_dates)


def progress_ratio(word_list: WordList) -> float:
    """Mastered / total, 0.0 for an empty list."""
    total = len(word_list.words)
    if total == 0:
        return 0.0
    return mastered_count(word_list) / total


@dataclass(frozen=True)
class ListSummary:
    """Dashboard figures for one list."""
    list_id: str
    total: int
    new: int
    learned: int
    mastered: int
    queued: int
    due: int

    @property
    def progress(self) -> float:
        return self.mastered / self.total if self.total else 0.0


def summarize_list(word_list: WordList, now: int) -> ListSummary:
    """
    Compute all dashboard counters for a list at a point in time.
    """
    total = len(word_list.words)
    learned = learned_count(word_list)
    word_ids = {word.id for word in word_list.words}

    return ListSummary(
        list_id=word_list.id,
        total=total,
        new=total - learned,
        learned=learned,
        mastered=mastered_count(word_list),
        # Stale ids for deleted words are not counted
        queued=len(word_list.queue_id_set & word_ids),
        due=len(select_review(word_list, now)),
    )
