"""Pytest configuration and fixtures."""

import random
from collections.abc import Generator
from types import SimpleNamespace

import pytest

from app.store import InMemoryStore
from core import list_repo, progress_db
from core.progress import ReferenceCalendar
from core.scheduling import MS_PER_DAY, Word, WordList

# 2024-05-01T00:00:00Z
T0 = 1_714_521_600_000


class FakeClock:
    """Settable epoch-ms clock."""

    def __init__(self, now: int = T0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def calendar() -> ReferenceCalendar:
    return ReferenceCalendar(offset_hours=8)


@pytest.fixture
def sample_list() -> WordList:
    """
    A: new, B: queued (never mastered), C: mastered once two days ago (due),
    D: mastered once an hour ago (not due).
    """
    return WordList(
        id="list-1",
        name="Core",
        words=(
            Word(id="a", english="abandon"),
            Word(id="b", english="absolute", incorrect_count=2),
            Word(id="c", english="abundant", mastered_dates=(T0 - 2 * MS_PER_DAY,)),
            Word(id="d", english="academic", mastered_dates=(T0 - 60 * 60 * 1000,)),
        ),
        consolidation_queue_ids=("b",),
    )


@pytest.fixture
def store(sample_list: WordList) -> InMemoryStore:
    return InMemoryStore([sample_list, WordList(id="empty", name="Empty")])


@pytest.fixture
def sqlite_db(tmp_path, monkeypatch) -> Generator[None, None, None]:
    """Point the progress database at a fresh SQLite file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'progress_db.sqlite'}")
    monkeypatch.delenv("TEST_MODE", raising=False)
    progress_db.dispose_engine()
    progress_db.init_db()
    try:
        yield
    finally:
        progress_db.dispose_engine()


class RecordingCollection:
    """Just enough of a pymongo collection for the list repository."""

    def __init__(self):
        self.docs: dict[str, dict] = {}

    def find_one(self, query):
        doc = self.docs.get(query["list_id"])
        return dict(doc, _id="oid") if doc is not None else None

    def find(self, query):
        return _Cursor(dict(doc, _id=f"oid-{i}") for i, doc in enumerate(self.docs.values()))

    def update_one(self, query, update, upsert=False):
        doc = self.docs.get(query["list_id"])
        if doc is None:
            assert upsert
            doc = {}
        doc.update(update["$set"])
        for key, amount in update.get("$inc", {}).items():
            doc[key] = doc.get(key, 0) + amount
        self.docs[query["list_id"]] = doc

    def delete_one(self, query):
        removed = self.docs.pop(query["list_id"], None)
        return SimpleNamespace(deleted_count=0 if removed is None else 1)

    def count_documents(self, query):
        return len(self.docs)


class _Cursor(list):
    def sort(self, key, direction):
        return _Cursor(sorted(self, key=lambda doc: doc[key], reverse=direction < 0))


@pytest.fixture
def mongo_collection() -> Generator[RecordingCollection, None, None]:
    """Point the list repository at an in-process collection."""
    collection = RecordingCollection()
    list_repo.set_collection(collection)
    try:
        yield collection
    finally:
        list_repo.set_collection(None)
