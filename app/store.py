"""
Persistence store used by the session host.

The scheduling engine never calls a store. The host loads lists from it
before a session and writes mutations back after each action.
"""

from __future__ import annotations

from typing import Protocol

from core import list_repo, progress_db
from core.scheduling.models import WordList


class ListNotFoundError(LookupError):
    """Raised when a list id is not in the store."""

    def __init__(self, list_id: str) -> None:
        self.list_id = list_id
        super().__init__(f"List {list_id} not found")


class ListStore(Protocol):
    """Contract the session host relies on."""

    def load_list(self, list_id: str) -> WordList:
        ...

    def save_list(self, word_list: WordList) -> None:
        ...

    def get_daily_count(self, list_id: str, day: str) -> int:
        ...

    def increment_daily_count(self, list_id: str, day: str) -> int:
        ...

    def daily_counts(self, list_id: str) -> dict[str, int]:
        ...


class InMemoryStore:
    """
    Dict-backed store for tests and embedding.

    WordList records are frozen, so storing them directly is safe.
    """

    def __init__(self, lists=None):
        self._lists: dict[str, WordList] = {wl.id: wl for wl in (lists or [])}
        self._daily: dict[tuple[str, str], int] = {}
        self.save_calls = 0

    def load_list(self, list_id: str) -> WordList:
        try:
            return self._lists[list_id]
        except KeyError:
            raise ListNotFoundError(list_id) from None

    def save_list(self, word_list: WordList) -> None:
        self._lists[word_list.id] = word_list
        self.save_calls += 1

    def all_lists(self) -> list[WordList]:
        return list(self._lists.values())

    def delete_list(self, list_id: str) -> bool:
        removed = self._lists.pop(list_id, None) is not None
        for key in [key for key in self._daily if key[0] == list_id]:
            del self._daily[key]
        return removed

    def get_daily_count(self, list_id: str, day: str) -> int:
        return self._daily.get((list_id, day), 0)

    def increment_daily_count(self, list_id: str, day: str) -> int:
        key = (list_id, day)
        self._daily[key] = self._daily.get(key, 0) + 1
        return self._daily[key]

    def daily_counts(self, list_id: str) -> dict[str, int]:
        return {
            day: count
            for (owner, day), count in sorted(self._daily.items())
            if owner == list_id
        }


class RepositoryStore:
    """
    Production store: word lists in MongoDB, daily counters in SQL.
    """

    def load_list(self, list_id: str) -> WordList:
        word_list = list_repo.get_list(list_id)
        if word_list is None:
            raise ListNotFoundError(list_id)
        return word_list

    def save_list(self, word_list: WordList) -> None:
        list_repo.save_list(word_list)

    def all_lists(self) -> list[WordList]:
        return list_repo.get_all_lists()

    def delete_list(self, list_id: str) -> bool:
        """Remove a list and its daily counters."""
        removed = list_repo.delete_list(list_id)
        progress_db.delete_daily_counts(list_id)
        return removed

    def get_daily_count(self, list_id: str, day: str) -> int:
        return progress_db.get_daily_count(list_id, day)

    def increment_daily_count(self, list_id: str, day: str) -> int:
        return progress_db.increment_daily_count(list_id, day)

    def daily_counts(self, list_id: str) -> dict[str, int]:
        return progress_db.get_daily_counts(list_id)
