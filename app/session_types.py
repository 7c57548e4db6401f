"""
Session action types used by the session controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.scheduling.models import TransitionResult


class SessionAction(str, Enum):
    """Buttons the learner can press on a card."""
    KNOWN = "known"
    UNKNOWN = "unknown"
    GOT_IT = "got_it"
    MASTERED = "mastered"
    REVIEW_LATER = "review_later"
    STILL_UNKNOWN = "still_unknown"


# Session method invoked for each action
ACTION_METHODS: dict[SessionAction, str] = {
    SessionAction.KNOWN: "submit_known",
    SessionAction.UNKNOWN: "submit_unknown",
    SessionAction.GOT_IT: "confirm_got_it",
    SessionAction.MASTERED: "confirm_mastered",
    SessionAction.REVIEW_LATER: "confirm_review_later",
    SessionAction.STILL_UNKNOWN: "confirm_still_unknown",
}


@dataclass(frozen=True)
class PendingWrite:
    """
    A transition waiting to be persisted.

    day is the reference-calendar day the card was completed on, so a
    deferred flush still credits the right date.
    """
    result: TransitionResult
    day: str
