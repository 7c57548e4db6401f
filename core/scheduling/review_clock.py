"""
Review Clock - due dates from mastery history.

Key concepts:
- Stage: number of prior masteries minus one
- Next due: last mastery + interval for the stage
- Due: now has reached the next-due time

Time is passed in explicitly (epoch milliseconds) so everything here is
deterministic.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import AbstractSet, Callable, Optional

from core.scheduling.constants import MS_PER_SECOND, NOT_SCHEDULED
from core.scheduling.intervals import duration_for_stage, stage_for
from core.scheduling.models import Word, WordStatus


Clock = Callable[[], int]


def system_clock() -> int:
    """Current wall time in epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * MS_PER_SECOND)


def next_due_time(word: Word) -> int:
    """
    Compute when a word is next due for review.

    Args:
        word: Word snapshot

    Returns:
        Epoch milliseconds, or NOT_SCHEDULED (0) if the word was never
        mastered. Callers must not schedule such words for review.
    """
    stage = stage_for(word)
    if stage is None:
        return NOT_SCHEDULED
    return word.last_mastered + duration_for_stage(stage)


def is_due(word: Word, now: int) -> bool:
    """True once a mastered word's next-due time has been reached."""
    if not word.mastered_dates:
        return False
    return now >= next_due_time(word)


def time_until_due(word: Word, now: int) -> Optional[int]:
    """
    Milliseconds until the word is due; negative when overdue.

    Display only. Returns None for words that were never mastered.
    """
    if not word.mastered_dates:
        return None
    return next_due_time(word) - now


def word_status(word: Word, queue_ids: AbstractSet[str]) -> WordStatus:
    """
    Derive the lifecycle state of a word.

    Queue membership wins over mastery history.
    """
    if word.id in queue_ids:
        return WordStatus(kind="queued")
    if word.mastered_dates:
        return WordStatus(kind="scheduled", due_at=next_due_time(word))
    return WordStatus(kind="new")
