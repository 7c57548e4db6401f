"""Scheduling exceptions."""

from __future__ import annotations


class SchedulingError(Exception):
    """Base exception for scheduler errors."""


class InvalidTransitionError(SchedulingError):
    """Raised when an action is not allowed in the session's current state."""

    def __init__(self, state: str, action: str) -> None:
        self.state = state
        self.action = action
        super().__init__(f"Action '{action}' is not allowed in state {state}")


class CorruptSessionError(SchedulingError):
    """Raised when the session cursor no longer resolves to a word."""

    def __init__(self, position: int, queue_length: int) -> None:
        self.position = position
        self.queue_length = queue_length
        super().__init__(
            f"Session is corrupt: no word at position {position} (queue length {queue_length})"
        )


class WordNotFoundError(SchedulingError):
    """Raised when a word id is not part of a list."""

    def __init__(self, word_id: str, list_id: str) -> None:
        self.word_id = word_id
        self.list_id = list_id
        super().__init__(f"Word {word_id} not found in list {list_id}")


class DuplicateWordError(SchedulingError):
    """Raised when copying a word into a list that already holds it."""

    def __init__(self, english: str, list_id: str) -> None:
        self.english = english
        self.list_id = list_id
        super().__init__(f"'{english}' is already in list {list_id}")
