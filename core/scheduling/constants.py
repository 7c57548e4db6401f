"""
Scheduling Constants and Parameters

All tunable values for the review scheduler in one place.
"""

from enum import Enum


# ---- Learning Modes ----

class Mode(str, Enum):
    """Which subset of a list a session works through."""
    MEMORIZE = "MEMORIZE"        # New words
    CONSOLIDATE = "CONSOLIDATE"  # Reinforcement queue
    REVIEW = "REVIEW"            # Mastered words that are due


# ---- Card States ----

class CardState(str, Enum):
    """Per-card reveal state within a session."""
    QUESTION = "QUESTION"
    FAIL_REVEALED = "FAIL_REVEALED"  # User said "unknown"
    PASS_REVEALED = "PASS_REVEALED"  # User said "known"


# ---- Time Units (milliseconds) ----

MS_PER_SECOND = 1000
MS_PER_DAY = 24 * 60 * 60 * MS_PER_SECOND


# ---- Review Intervals ----
# Index = stage = number of prior masteries - 1

INTERVAL_DAYS = (1, 2, 4, 7, 15)
FALLBACK_INTERVAL_DAYS = 30  # Used once a word outgrows the table

# Sentinel returned for words that have never been mastered
NOT_SCHEDULED = 0


# ---- Reference Calendar ----
# Daily counters roll over at midnight in this fixed UTC offset,
# independent of where the learner is.

DEFAULT_REFERENCE_UTC_OFFSET_HOURS = 8
