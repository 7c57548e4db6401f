"""
Vocabulary review scheduler.

Main API for the learning engine:
- Interval table and review clock (when is a word due?)
- Queue builder (which words does a session get?)
- Learning session (what does each answer change?)

Quick start:
    from core import scheduling

    session = scheduling.start_session(word_list, scheduling.Mode.MEMORIZE, now)
    scheduling.submit_known(session)
    result = scheduling.confirm_mastered(session)
    word_list = scheduling.apply_transition(word_list, result)
"""

# Enums and parameters
from core.scheduling.constants import (
    CardState,
    Mode,
    INTERVAL_DAYS,
    FALLBACK_INTERVAL_DAYS,
    MS_PER_DAY,
    NOT_SCHEDULED,
)

# Records
from core.scheduling.models import (
    SessionStats,
    TransitionResult,
    Word,
    WordList,
    WordStatus,
)

# Interval table and clock
from core.scheduling.intervals import duration_for_stage, stage_for
from core.scheduling.review_clock import (
    Clock,
    is_due,
    next_due_time,
    system_clock,
    time_until_due,
    word_status,
)

# Queue building
from core.scheduling.queue_builder import build_queue, eligible_counts

# Session state machine
from core.scheduling.session import (
    FINISHED,
    LearningSession,
    confirm_got_it,
    confirm_mastered,
    confirm_review_later,
    confirm_still_unknown,
    current_card,
    start_session,
    submit_known,
    submit_unknown,
)
from core.scheduling.mutations import apply_transition

# Errors
from core.scheduling.errors import (
    CorruptSessionError,
    DuplicateWordError,
    InvalidTransitionError,
    SchedulingError,
    WordNotFoundError,
)


__all__ = [
    # Enums
    "CardState",
    "Mode",

    # Parameters
    "INTERVAL_DAYS",
    "FALLBACK_INTERVAL_DAYS",
    "MS_PER_DAY",
    "NOT_SCHEDULED",

    # Records
    "SessionStats",
    "TransitionResult",
    "Word",
    "WordList",
    "WordStatus",

    # Clock
    "Clock",
    "duration_for_stage",
    "stage_for",
    "is_due",
    "next_due_time",
    "system_clock",
    "time_until_due",
    "word_status",

    # Queue + session
    "build_queue",
    "eligible_counts",
    "FINISHED",
    "LearningSession",
    "start_session",
    "current_card",
    "submit_known",
    "submit_unknown",
    "confirm_got_it",
    "confirm_mastered",
    "confirm_review_later",
    "confirm_still_unknown",
    "apply_transition",

    # Errors
    "SchedulingError",
    "InvalidTransitionError",
    "CorruptSessionError",
    "WordNotFoundError",
    "DuplicateWordError",
]
