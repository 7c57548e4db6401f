"""
Interval Table - review delays indexed by stage.
"""

from __future__ import annotations

from typing import Optional

from core.scheduling.constants import (
    FALLBACK_INTERVAL_DAYS,
    INTERVAL_DAYS,
    MS_PER_DAY,
)


INTERVALS_MS: tuple[int, ...] = tuple(days * MS_PER_DAY for days in INTERVAL_DAYS)
FALLBACK_INTERVAL_MS: int = FALLBACK_INTERVAL_DAYS * MS_PER_DAY


def duration_for_stage(stage: int) -> int:
    """
    Look up the review delay for a stage.

    Args:
        stage: Zero-based count of prior masteries

    Returns:
        Delay in milliseconds (fallback once stage runs past the table)
    """
    if stage < 0:
        raise ValueError(f"Stage must be non-negative, got {stage}")
    if stage < len(INTERVALS_MS):
        return INTERVALS_MS[stage]
    return FALLBACK_INTERVAL_MS


def stage_for(word) -> Optional[int]:
    """Stage of a word, or None if it has never been mastered."""
    if not word.mastered_dates:
        return None
    return len(word.mastered_dates) - 1
