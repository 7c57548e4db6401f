"""
Pydantic models for stored word lists.

These models define the structure of MongoDB documents and validate data
coming back from the store (including backups written by earlier versions,
which used camelCase keys and `chinese` for the definition).
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from core.scheduling.models import Word, WordList


class WordEntry(BaseModel):
    """A single word as stored inside a list document."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., description="Stable word identifier")
    english: str = Field(..., description="Headword")
    phonetic: str = Field(default="", description="Pronunciation")
    part_of_speech: str = Field(
        default="",
        validation_alias=AliasChoices("part_of_speech", "partOfSpeech"),
    )
    definition: str = Field(
        default="",
        validation_alias=AliasChoices("definition", "chinese", "meaning"),
        description="Meaning shown on the answer side",
    )
    mastered_dates: list[int] = Field(
        default_factory=list,
        validation_alias=AliasChoices("mastered_dates", "masteredDates"),
        description="Epoch-ms timestamps of each mastery, oldest first",
    )
    incorrect_count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("incorrect_count", "incorrectCount"),
    )

    @field_validator("mastered_dates")
    @classmethod
    def dates_non_decreasing(cls, value: list[int]) -> list[int]:
        """Mastery history is append-only."""
        if any(later < earlier for earlier, later in zip(value, value[1:])):
            raise ValueError("mastered_dates must be non-decreasing")
        return value

    def to_record(self) -> Word:
        return Word(
            id=self.id,
            english=self.english,
            phonetic=self.phonetic,
            definition=self.definition,
            mastered_dates=tuple(self.mastered_dates),
            incorrect_count=self.incorrect_count,
            part_of_speech=self.part_of_speech,
        )

    @classmethod
    def from_record(cls, word: Word) -> WordEntry:
        return cls(
            id=word.id,
            english=word.english,
            phonetic=word.phonetic,
            part_of_speech=word.part_of_speech,
            definition=word.definition,
            mastered_dates=list(word.mastered_dates),
            incorrect_count=word.incorrect_count,
        )


class WordListDocument(BaseModel):
    """
    A word list document in MongoDB.

    One document per list; words are embedded in display order.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    list_id: str = Field(..., validation_alias=AliasChoices("list_id", "id"))
    name: str = ""
    description: str = ""
    words: list[WordEntry] = Field(default_factory=list)
    consolidation_queue_ids: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("consolidation_queue_ids", "consolidationQueueIds"),
    )
    version: Optional[int] = None  # bumped on every save

    def to_record(self) -> WordList:
        return WordList(
            id=self.list_id,
            name=self.name,
            description=self.description,
            words=tuple(entry.to_record() for entry in self.words),
            consolidation_queue_ids=tuple(self.consolidation_queue_ids),
        )

    @classmethod
    def from_record(cls, word_list: WordList) -> WordListDocument:
        return cls(
            list_id=word_list.id,
            name=word_list.name,
            description=word_list.description,
            words=[WordEntry.from_record(word) for word in word_list.words],
            consolidation_queue_ids=list(word_list.consolidation_queue_ids),
        )


# ---- Seed Data ----

DEFAULT_LISTS: list[dict] = [
    {
        "list_id": "list-1",
        "name": "CET-4 Core",
        "description": "Essential words for College English Test Band 4",
        "consolidation_queue_ids": [],
        "words": [
            {"id": "w1", "english": "abandon", "phonetic": "/əˈbændən/", "definition": "v. 放弃，遗弃；抛弃"},
            {"id": "w2", "english": "absolute", "phonetic": "/ˈæbsəluːt/", "definition": "adj. 绝对的；完全的"},
            {"id": "w3", "english": "abundant", "phonetic": "/əˈbʌndənt/", "definition": "adj. 丰富的；充裕的"},
        ],
    },
]


def default_lists() -> list[WordList]:
    """Demo lists used when the store is empty."""
    return [WordListDocument.model_validate(doc).to_record() for doc in DEFAULT_LISTS]
