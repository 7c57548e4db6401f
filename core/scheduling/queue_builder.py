"""
Session Queue Builder

Selects the words eligible for a session and fixes their order:
1. MEMORIZE: never mastered and not in the reinforcement queue (shuffled)
2. CONSOLIDATE: in the reinforcement queue, most errors first (stable)
3. REVIEW: mastered at least once and due (shuffled)

The returned queue is a snapshot. Later edits to the list never change a
queue that has already been built.
"""

from __future__ import annotations

import random
from typing import Optional

import structlog

from core.scheduling.constants import Mode
from core.scheduling.models import Word, WordList
from core.scheduling.review_clock import is_due


logger = structlog.get_logger(__name__)


def select_memorize(word_list: WordList) -> list[Word]:
    """Words still in the new state."""
    queue_ids = word_list.queue_id_set
    return [
        word for word in word_list.words
        if not word.mastered_dates and word.id not in queue_ids
    ]


def select_consolidate(word_list: WordList) -> list[Word]:
    """Queued words, most error-prone first. Ties keep display order."""
    queue_ids = word_list.queue_id_set
    queued = [word for word in word_list.words if word.id in queue_ids]
    # sorted() is stable, so equal counts stay in list order
    return sorted(queued, key=lambda word: word.incorrect_count, reverse=True)


def select_review(word_list: WordList, now: int) -> list[Word]:
    """
    Mastered words whose next-due time has passed.

    Queue membership is not checked here: a queued word that is also due
    shows up in both CONSOLIDATE and REVIEW.
    """
    return [
        word for word in word_list.words
        if word.mastered_dates and is_due(word, now)
    ]


def build_queue(
    word_list: WordList,
    mode: Mode,
    now: int,
    rng: Optional[random.Random] = None
) -> tuple[Word, ...]:
    """
    Build the ordered session queue for a list and mode.

    Args:
        word_list: List snapshot
        mode: Learning mode
        now: Current time (epoch ms), used for due checks
        rng: Optional random source for the shuffle (seed it in tests)

    Returns:
        Tuple of Word copies, each to be processed once. Empty when
        nothing is eligible.
    """
    mode = Mode(mode)
    shuffler = rng or random

    if mode == Mode.MEMORIZE:
        selection = select_memorize(word_list)
        shuffler.shuffle(selection)
    elif mode == Mode.CONSOLIDATE:
        selection = select_consolidate(word_list)
    else:
        selection = select_review(word_list, now)
        shuffler.shuffle(selection)

    logger.debug(
        "session_queue_built",
        list_id=word_list.id,
        mode=mode.value,
        size=len(selection),
    )
    return tuple(selection)


def eligible_counts(word_list: WordList, now: int) -> dict[Mode, int]:
    """
    Count eligible words per mode without shuffling.

    Used for dashboard badges.
    """
    return {
        Mode.MEMORIZE: len(select_memorize(word_list)),
        Mode.CONSOLIDATE: len(select_consolidate(word_list)),
        Mode.REVIEW: len(select_review(word_list, now)),
    }
