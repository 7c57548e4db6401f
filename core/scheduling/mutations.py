"""
Apply session results to a list snapshot.

Only the scheduling fields (mastered_dates, incorrect_count) are taken from
the session's copy of the word. Display text comes from the list being
updated, so edits made elsewhere during a session survive.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from core.scheduling.models import TransitionResult, WordList


logger = structlog.get_logger(__name__)


def apply_transition(word_list: WordList, result: TransitionResult) -> WordList:
    """
    Return a new list with the transition's word and queue changes applied.

    Results that carry no word (reveal steps) return the list unchanged, as
    do results for a word deleted from the list since the session started.
    """
    mutated = result.mutated_word
    if mutated is None:
        return word_list

    stored = word_list.get_word(mutated.id)
    if stored is None:
        logger.warning("transition_word_missing", list_id=word_list.id, word_id=mutated.id)
        return word_list

    updated = replace(
        stored,
        mastered_dates=mutated.mastered_dates,
        incorrect_count=mutated.incorrect_count,
    )
    words = tuple(updated if word.id == updated.id else word for word in word_list.words)

    queue_ids = word_list.consolidation_queue_ids
    if result.queue_add and updated.id not in queue_ids:
        queue_ids = queue_ids + (updated.id,)
    if result.queue_remove:
        queue_ids = tuple(word_id for word_id in queue_ids if word_id != updated.id)

    return replace(word_list, words=words, consolidation_queue_ids=queue_ids)
