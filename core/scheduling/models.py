"""
Records the scheduler works on.

Words and lists are frozen snapshots owned by the host. The engine never
mutates them; it hands back new copies and mutation descriptors instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal, Optional


@dataclass(frozen=True)
class Word:
    """
    A single vocabulary entry.

    mastered_dates holds one epoch-millisecond timestamp per graduation
    event, oldest first.
    """
    id: str
    english: str
    phonetic: str = ""
    definition: str = ""
    mastered_dates: tuple[int, ...] = ()
    incorrect_count: int = 0
    part_of_speech: str = ""  # display only, e.g. "adj."

    def __post_init__(self):
        """Normalize sequences and enforce record invariants."""
        object.__setattr__(self, "mastered_dates", tuple(self.mastered_dates))
        if self.incorrect_count < 0:
            raise ValueError(f"incorrect_count must be non-negative, got {self.incorrect_count}")
        dates = self.mastered_dates
        if any(later < earlier for earlier, later in zip(dates, dates[1:])):
            raise ValueError(f"mastered_dates must be non-decreasing for word {self.id}")

    @property
    def mastery_count(self) -> int:
        return len(self.mastered_dates)

    @property
    def last_mastered(self) -> Optional[int]:
        return self.mastered_dates[-1] if self.mastered_dates else None

    def with_mastery(self, timestamp: int) -> Word:
        """Copy with one more mastery event appended."""
        return replace(self, mastered_dates=self.mastered_dates + (timestamp,))

    def with_failure(self) -> Word:
        """Copy with the error counter bumped."""
        return replace(self, incorrect_count=self.incorrect_count + 1)


@dataclass(frozen=True)
class WordList:
    """
    A named collection of words plus its reinforcement queue.

    consolidation_queue_ids has set semantics; it is kept as a tuple so
    the persisted order stays stable.
    """
    id: str
    name: str = ""
    description: str = ""
    words: tuple[Word, ...] = ()
    consolidation_queue_ids: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "words", tuple(self.words))
        # De-dupe while keeping first-seen order
        object.__setattr__(
            self,
            "consolidation_queue_ids",
            tuple(dict.fromkeys(self.consolidation_queue_ids)),
        )

    @property
    def queue_id_set(self) -> frozenset[str]:
        return frozenset(self.consolidation_queue_ids)

    def get_word(self, word_id: str) -> Optional[Word]:
        for word in self.words:
            if word.id == word_id:
                return word
        return None

    def is_queued(self, word_id: str) -> bool:
        return word_id in self.queue_id_set


# ---- Lifecycle Status ----

StatusKind = Literal["new", "queued", "scheduled"]


@dataclass(frozen=True)
class WordStatus:
    """
    Tagged lifecycle state derived from mastery history and queue membership.

    due_at is only set for scheduled words.
    """
    kind: StatusKind
    due_at: Optional[int] = None


# ---- Mutation Descriptors ----

@dataclass(frozen=True)
class TransitionResult:
    """
    Outcome of one session action.

    mutated_word is the updated copy the host should store (None when the
    action only changed the reveal state). queue_add / queue_remove describe
    the change to the list's reinforcement queue.
    """
    mutated_word: Optional[Word] = None
    queue_add: bool = False
    queue_remove: bool = False
    session_advanced: bool = False
    finished: bool = False
    counts_toward_daily: bool = False


@dataclass
class SessionStats:
    """Running tallies for one session."""
    completed: int = 0
    mastered: int = 0
    failed: int = 0
    daily_progress: int = 0
    by_action: dict[str, int] = field(default_factory=dict)
