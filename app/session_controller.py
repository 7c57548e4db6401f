"""
Session lifecycle for the host application.

Loads a list, builds a session, dispatches learner actions and writes the
resulting mutations back to the store. Writes can be applied after every
action or buffered and flushed at card boundaries / session end.
"""

from __future__ import annotations

import random
from typing import Optional, Union

import structlog

from app.session_types import ACTION_METHODS, PendingWrite, SessionAction
from app.store import ListStore
from core.progress import ListSummary, ReferenceCalendar, summarize_list
from core.scheduling import (
    Clock,
    CorruptSessionError,
    LearningSession,
    Mode,
    TransitionResult,
    Word,
    apply_transition,
    start_session,
    system_clock,
)


logger = structlog.get_logger(__name__)


class SessionController:
    """
    Host-side glue between a store and the learning engine.
    """

    def __init__(
        self,
        store: ListStore,
        calendar: Optional[ReferenceCalendar] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        buffered: bool = False
    ):
        self.store = store
        self.calendar = calendar or ReferenceCalendar.from_env()
        self.clock = clock or system_clock
        self.rng = rng
        self.buffered = buffered
        self.session: Optional[LearningSession] = None
        self.list_id: Optional[str] = None
        self._pending: list[PendingWrite] = []

    # ---- Lifecycle ----

    def start(self, list_id: str, mode: Union[Mode, str]) -> LearningSession:
        """
        Start a new session for a list, replacing any current one.

        A session with nothing eligible is returned already finished.
        """
        if self.session is not None:
            self.end()

        word_list = self.store.load_list(list_id)
        self.list_id = list_id
        self.session = start_session(
            word_list,
            Mode(mode),
            now=self.clock(),
            rng=self.rng,
            clock=self.clock,
        )
        self._pending = []

        logger.info(
            "session_started",
            list_id=list_id,
            mode=self.session.mode.value,
            queue_size=len(self.session.queue),
        )
        return self.session

    def current_card(self) -> Optional[Word]:
        if self.session is None:
            return None
        return self.session.current_card()

    def act(self, action: Union[SessionAction, str]) -> TransitionResult:
        """
        Apply one learner action to the current card.

        Raises:
            RuntimeError: no session has been started
            InvalidTransitionError: action not allowed in the current state
            CorruptSessionError: session aborted; already-completed cards are kept
        """
        if self.session is None:
            raise RuntimeError("No active session. Call start() first.")

        method = getattr(self.session, ACTION_METHODS[SessionAction(action)])
        try:
            result = method()
        except CorruptSessionError:
            self.abort()
            raise

        if result.session_advanced:
            self._pending.append(
                PendingWrite(result=result, day=self.calendar.day_key(self.clock()))
            )
            if not self.buffered or result.finished:
                self.flush()

        return result

    def flush(self) -> int:
        """
        Write buffered transitions to the store.

        The list is reloaded first so edits made outside the session are
        preserved; words deleted in the meantime are skipped. Pending writes
        are kept if the save fails. Returns the number of transitions written.
        """
        if not self._pending or self.list_id is None:
            return 0

        pending = list(self._pending)
        word_list = self.store.load_list(self.list_id)
        for write in pending:
            word_list = apply_transition(word_list, write.result)
        self.store.save_list(word_list)
        self._pending = []

        for write in pending:
            if write.result.counts_toward_daily:
                self.store.increment_daily_count(self.list_id, write.day)

        logger.debug("session_flushed", list_id=self.list_id, writes=len(pending))
        return len(pending)

    def end(self) -> None:
        """End the current session, persisting anything still buffered."""
        self.flush()
        self.session = None

    def abort(self) -> None:
        """
        Drop a broken session.

        Cards completed before the failure are still written.
        """
        logger.error("session_aborted", list_id=self.list_id)
        self.end()

    # ---- Progress ----

    def daily_count(self, list_id: Optional[str] = None) -> int:
        """Today's (reference-zone) MEMORIZE count for a list."""
        list_id = list_id or self.list_id
        if list_id is None:
            return 0
        today = self.calendar.day_key(self.clock())
        pending_today = sum(
            1 for write in self._pending
            if write.day == today and write.result.counts_toward_daily
        ) if list_id == self.list_id else 0
        return self.store.get_daily_count(list_id, today) + pending_today

    def summary(self, list_id: Optional[str] = None) -> ListSummary:
        """Dashboard counters for a list as currently stored."""
        list_id = list_id or self.list_id
        if list_id is None:
            raise RuntimeError("No list selected")
        return summarize_list(self.store.load_list(list_id), self.clock())
