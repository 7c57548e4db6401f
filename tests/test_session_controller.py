"""Tests for the host-side session controller."""

from dataclasses import replace

import pytest

from app.session_controller import SessionController
from app.session_types import SessionAction
from app.store import InMemoryStore, ListNotFoundError
from core.list_ops import delete_word, update_word_text
from core.scheduling import (
    CorruptSessionError,
    InvalidTransitionError,
    LearningSession,
    Mode,
    Word,
    WordList,
)
from tests.conftest import T0


@pytest.fixture
def controller(store, calendar, clock, rng):
    return SessionController(store, calendar=calendar, clock=clock, rng=rng)


class FailingSaveStore(InMemoryStore):
    """In-memory store whose saves can be switched to fail."""

    def __init__(self, lists=None):
        super().__init__(lists)
        self.fail = False

    def save_list(self, word_list: WordList) -> None:
        if self.fail:
            raise ConnectionError("store unavailable")
        super().save_list(word_list)


def _two_new_words() -> WordList:
    return WordList(
        id="fresh",
        words=(Word(id="x", english="xenial"), Word(id="y", english="yield")),
    )


class TestWriteThrough:
    def test_memorize_mastery_is_persisted_and_counted(self, controller, store):
        controller.start("list-1", Mode.MEMORIZE)
        assert controller.current_card().id == "a"

        controller.act(SessionAction.KNOWN)
        result = controller.act(SessionAction.MASTERED)

        assert result.finished
        assert store.load_list("list-1").get_word("a").mastered_dates == (T0,)
        assert store.save_calls == 1
        assert controller.daily_count() == 1
        assert store.daily_counts("list-1") == {"2024-05-01": 1}

    def test_consolidate_failure_keeps_word_queued(self, controller, store):
        controller.start("list-1", "CONSOLIDATE")
        controller.act("known")
        controller.act("still_unknown")

        word_list = store.load_list("list-1")
        assert word_list.get_word("b").incorrect_count == 3
        assert word_list.consolidation_queue_ids == ("b",)
        assert controller.daily_count() == 0

    def test_review_mastery_appends_date(self, controller, store):
        controller.start("list-1", Mode.REVIEW)
        assert controller.current_card().id == "c"
        controller.act(SessionAction.KNOWN)
        controller.act(SessionAction.MASTERED)

        word = store.load_list("list-1").get_word("c")
        assert word.mastery_count == 2
        assert word.last_mastered == T0

    def test_memorize_failure_enqueues(self, controller, store):
        controller.start("list-1", Mode.MEMORIZE)
        controller.act(SessionAction.UNKNOWN)
        controller.act(SessionAction.GOT_IT)

        word_list = store.load_list("list-1")
        assert word_list.is_queued("a")
        assert word_list.get_word("a").incorrect_count == 1
        assert controller.daily_count() == 1

    def test_display_edits_during_session_survive(self, controller, store):
        controller.start("list-1", Mode.MEMORIZE)
        controller.act(SessionAction.KNOWN)
        store.save_list(update_word_text(store.load_list("list-1"), "a", definition="v. 放弃"))
        controller.act(SessionAction.MASTERED)

        word = store.load_list("list-1").get_word("a")
        assert word.definition == "v. 放弃"
        assert word.mastered_dates == (T0,)

    def test_word_deleted_during_session_is_skipped(self, controller, store):
        controller.start("list-1", Mode.MEMORIZE)
        controller.act(SessionAction.UNKNOWN)
        store.save_list(delete_word(store.load_list("list-1"), "a"))

        result = controller.act(SessionAction.GOT_IT)

        word_list = store.load_list("list-1")
        assert result.finished
        assert word_list.get_word("a") is None
        assert "a" not in word_list.consolidation_queue_ids
        assert controller.daily_count() == 1

    def test_word_dequeued_during_session_still_records_mastery(self, controller, store):
        controller.start("list-1", Mode.CONSOLIDATE)
        controller.act(SessionAction.KNOWN)
        store.save_list(replace(store.load_list("list-1"), consolidation_queue_ids=()))

        controller.act(SessionAction.MASTERED)

        word_list = store.load_list("list-1")
        assert word_list.consolidation_queue_ids == ()
        assert word_list.get_word("b").mastered_dates == (T0,)


class TestBuffered:
    def test_writes_flush_when_session_finishes(self, calendar, clock, rng):
        store = InMemoryStore([_two_new_words()])
        controller = SessionController(store, calendar=calendar, clock=clock, rng=rng, buffered=True)
        controller.start("fresh", Mode.MEMORIZE)

        controller.act(SessionAction.KNOWN)
        controller.act(SessionAction.MASTERED)
        assert store.save_calls == 0
        assert controller.daily_count() == 1

        controller.act(SessionAction.UNKNOWN)
        result = controller.act(SessionAction.GOT_IT)

        assert result.finished
        assert store.save_calls == 1
        assert store.get_daily_count("fresh", "2024-05-01") == 2
        assert controller.daily_count() == 2

    def test_deleted_word_does_not_drop_earlier_writes(self, calendar, clock, rng):
        store = InMemoryStore([_two_new_words()])
        controller = SessionController(store, calendar=calendar, clock=clock, rng=rng, buffered=True)
        controller.start("fresh", Mode.MEMORIZE)
        first = controller.current_card().id
        second = ({"x", "y"} - {first}).pop()

        controller.act(SessionAction.KNOWN)
        controller.act(SessionAction.MASTERED)
        store.save_list(delete_word(store.load_list("fresh"), second))
        controller.act(SessionAction.UNKNOWN)
        result = controller.act(SessionAction.GOT_IT)

        word_list = store.load_list("fresh")
        assert result.finished
        assert word_list.get_word(first).mastered_dates == (T0,)
        assert word_list.consolidation_queue_ids == ()
        assert store.get_daily_count("fresh", "2024-05-01") == 2
        assert controller.daily_count() == 2

    def test_failed_save_keeps_pending_writes(self, calendar, clock, rng):
        store = FailingSaveStore([_two_new_words()])
        controller = SessionController(store, calendar=calendar, clock=clock, rng=rng, buffered=True)
        controller.start("fresh", Mode.MEMORIZE)
        controller.act(SessionAction.KNOWN)
        controller.act(SessionAction.MASTERED)

        store.fail = True
        with pytest.raises(ConnectionError):
            controller.flush()
        assert controller.daily_count() == 1

        store.fail = False
        assert controller.flush() == 1
        assert store.get_daily_count("fresh", "2024-05-01") == 1

    def test_end_flushes_pending(self, calendar, clock, rng):
        store = InMemoryStore([_two_new_words()])
        controller = SessionController(store, calendar=calendar, clock=clock, rng=rng, buffered=True)
        controller.start("fresh", Mode.MEMORIZE)
        controller.act(SessionAction.UNKNOWN)
        controller.act(SessionAction.GOT_IT)

        controller.end()

        assert controller.session is None
        assert len(store.load_list("fresh").consolidation_queue_ids) == 1
        assert store.get_daily_count("fresh", "2024-05-01") == 1


class TestErrors:
    def test_act_without_session(self, controller):
        with pytest.raises(RuntimeError):
            controller.act(SessionAction.KNOWN)

    def test_unknown_list(self, controller):
        with pytest.raises(ListNotFoundError):
            controller.start("missing", Mode.MEMORIZE)

    def test_invalid_transition_leaves_store_untouched(self, controller, store):
        before = store.load_list("list-1")
        controller.start("list-1", Mode.MEMORIZE)
        with pytest.raises(InvalidTransitionError):
            controller.act(SessionAction.MASTERED)
        assert store.save_calls == 0
        assert store.load_list("list-1") is before

    def test_empty_selection_is_finished(self, controller):
        session = controller.start("empty", Mode.REVIEW)
        assert session.finished
        assert controller.current_card() is None
        with pytest.raises(InvalidTransitionError):
            controller.act(SessionAction.KNOWN)

    def test_corrupt_session_aborts_and_keeps_completed_cards(self, controller, store, clock, sample_list):
        word = sample_list.get_word("a")
        controller.list_id = "list-1"
        controller.session = LearningSession([word, None], Mode.MEMORIZE, clock=clock, list_id="list-1")

        controller.act(SessionAction.KNOWN)
        controller.act(SessionAction.MASTERED)
        with pytest.raises(CorruptSessionError):
            controller.act(SessionAction.KNOWN)

        assert controller.session is None
        assert store.load_list("list-1").get_word("a").mastered_dates == (T0,)
        assert controller.daily_count("list-1") == 1


def test_summary(controller):
    controller.start("list-1", Mode.MEMORIZE)
    summary = controller.summary()
    assert summary.total == 4
    assert summary.due == 1


def test_in_memory_delete_list_drops_counters(controller, store):
    controller.start("list-1", Mode.MEMORIZE)
    controller.act(SessionAction.KNOWN)
    controller.act(SessionAction.MASTERED)

    assert store.delete_list("list-1")
    assert not store.delete_list("list-1")
    assert store.daily_counts("list-1") == {}
    assert [wl.id for wl in store.all_lists()] == ["empty"]
