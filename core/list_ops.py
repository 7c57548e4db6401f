"""
List-level word operations.

Pure functions over WordList snapshots: each returns a new list for the
host to persist.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Optional

from core.scheduling.errors import DuplicateWordError, WordNotFoundError
from core.scheduling.models import Word, WordList


def new_word_id() -> str:
    return str(uuid.uuid4())


def new_list(name: str, description: str = "", list_id: Optional[str] = None) -> WordList:
    """Create an empty list."""
    return WordList(id=list_id or str(uuid.uuid4()), name=name, description=description)


def rename_list(word_list: WordList, name: str, description: str) -> WordList:
    return replace(word_list, name=name, description=description)


def add_word(
    word_list: WordList,
    english: str,
    phonetic: str = "",
    definition: str = "",
    part_of_speech: str = "",
    word_id: Optional[str] = None
) -> tuple[WordList, Word]:
    """
    Append a fresh word (no mastery history, no errors).

    Returns:
        (updated_list, new_word)
    """
    word = Word(
        id=word_id or new_word_id(),
        english=english.strip(),
        phonetic=phonetic.strip(),
        definition=definition.strip(),
        part_of_speech=part_of_speech.strip(),
    )
    return replace(word_list, words=word_list.words + (word,)), word


def update_word_text(
    word_list: WordList,
    word_id: str,
    english: Optional[str] = None,
    phonetic: Optional[str] = None,
    definition: Optional[str] = None,
    part_of_speech: Optional[str] = None
) -> WordList:
    """
    Edit a word's display text. Scheduling fields are left alone.
    """
    stored = word_list.get_word(word_id)
    if stored is None:
        raise WordNotFoundError(word_id, word_list.id)

    updated = replace(
        stored,
        english=stored.english if english is None else english.strip(),
        phonetic=stored.phonetic if phonetic is None else phonetic.strip(),
        definition=stored.definition if definition is None else definition.strip(),
        part_of_speech=(
            stored.part_of_speech if part_of_speech is None else part_of_speech.strip()
        ),
    )
    words = tuple(updated if word.id == word_id else word for word in word_list.words)
    return replace(word_list, words=words)


def delete_word(word_list: WordList, word_id: str) -> WordList:
    """
    Remove a word and drop its id from the reinforcement queue.
    """
    if word_list.get_word(word_id) is None:
        raise WordNotFoundError(word_id, word_list.id)
    return replace(
        word_list,
        words=tuple(word for word in word_list.words if word.id != word_id),
        consolidation_queue_ids=tuple(
            queued for queued in word_list.consolidation_queue_ids if queued != word_id
        ),
    )


def _same_entry(a: Word, b: Word) -> bool:
    return (a.english, a.phonetic, a.definition) == (b.english, b.phonetic, b.definition)


def copy_word_to_list(word: Word, target: WordList) -> tuple[WordList, Word]:
    """
    Copy a word into another list as a brand-new entry.

    The copy gets a new id and starts with no mastery history and no errors.

    Raises:
        DuplicateWordError: target already holds the same english/phonetic/definition
    """
    if any(_same_entry(existing, word) for existing in target.words):
        raise DuplicateWordError(word.english, target.id)

    copy = replace(word, id=new_word_id(), mastered_dates=(), incorrect_count=0)
    return replace(target, words=target.words + (copy,)), copy
