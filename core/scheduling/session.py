"""
Learning Session - per-card state machine.

Each card starts in QUESTION. The learner first says whether they know the
word, which reveals the answer, then confirms an outcome:

    QUESTION --known--> PASS_REVEALED --mastered / review later / still unknown--> done
    QUESTION --unknown--> FAIL_REVEALED --got it--> done

The session never touches the host's store. Every action returns a
TransitionResult describing what the host should write back.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

import structlog

from core.scheduling.constants import CardState, Mode
from core.scheduling.errors import CorruptSessionError, InvalidTransitionError
from core.scheduling.models import SessionStats, TransitionResult, Word, WordList
from core.scheduling.queue_builder import build_queue
from core.scheduling.review_clock import Clock, system_clock


logger = structlog.get_logger(__name__)

FINISHED = "FINISHED"


class LearningSession:
    """
    One bounded pass over a snapshot queue for a single mode.

    Finished is absorbing: once every card has been processed (or the queue
    was empty to begin with) all further actions are rejected.
    """

    def __init__(
        self,
        queue: Iterable[Word],
        mode: Mode,
        clock: Optional[Clock] = None,
        list_id: Optional[str] = None
    ):
        self.queue: tuple[Word, ...] = tuple(queue)
        self.mode = Mode(mode)
        self.list_id = list_id
        self.position = 0
        self.card_state = CardState.QUESTION
        self.stats = SessionStats()
        self._clock = clock or system_clock
        self._corruption: Optional[CorruptSessionError] = None

    # ---- State ----

    @property
    def finished(self) -> bool:
        return self._corruption is None and self.position >= len(self.queue)

    @property
    def corrupt(self) -> bool:
        return self._corruption is not None

    @property
    def state(self) -> str:
        """Current state name, FINISHED once the queue is exhausted."""
        if self.finished:
            return FINISHED
        return self.card_state.value

    @property
    def remaining(self) -> int:
        return max(0, len(self.queue) - self.position)

    def current_card(self) -> Optional[Word]:
        """
        Word under the cursor, or None when the session is finished.

        Raises CorruptSessionError if the cursor no longer resolves.
        """
        if self._corruption is not None:
            raise self._corruption
        if self.finished:
            return None
        return self._resolve_current()

    # ---- Question Actions ----

    def submit_known(self) -> TransitionResult:
        """Learner claims to know the word; reveal the answer."""
        self._require(CardState.QUESTION, "submit_known")
        self.card_state = CardState.PASS_REVEALED
        return TransitionResult()

    def submit_unknown(self) -> TransitionResult:
        """Learner does not know the word; reveal the answer."""
        self._require(CardState.QUESTION, "submit_unknown")
        self.card_state = CardState.FAIL_REVEALED
        return TransitionResult()

    # ---- Confirm Actions ----

    def confirm_got_it(self) -> TransitionResult:
        """Fail path: count the miss and send the word to the reinforcement queue."""
        word = self._require(CardState.FAIL_REVEALED, "confirm_got_it")
        return self._complete(word.with_failure(), queue_add=True, action="got_it")

    def confirm_mastered(self) -> TransitionResult:
        """Pass path: record a mastery event and take the word off the queue."""
        word = self._require(CardState.PASS_REVEALED, "confirm_mastered")
        mutated = word.with_mastery(self._clock())
        return self._complete(mutated, queue_remove=True, action="mastered")

    def confirm_review_later(self) -> TransitionResult:
        """Pass path, but the learner wants more practice first."""
        word = self._require(CardState.PASS_REVEALED, "confirm_review_later")
        return self._complete(word.with_failure(), queue_add=True, action="review_later")

    def confirm_still_unknown(self) -> TransitionResult:
        """Pass path where the revealed answer showed the learner was mistaken."""
        word = self._require(CardState.PASS_REVEALED, "confirm_still_unknown")
        return self._complete(word.with_failure(), queue_add=True, action="still_unknown")

    # ---- Internals ----

    def _resolve_current(self) -> Word:
        word = self.queue[self.position] if self.position < len(self.queue) else None
        if not isinstance(word, Word):
            self._corruption = CorruptSessionError(self.position, len(self.queue))
            logger.error(
                "session_corrupt",
                list_id=self.list_id,
                mode=self.mode.value,
                position=self.position,
                queue_length=len(self.queue),
            )
            raise self._corruption
        return word

    def _require(self, expected: CardState, action: str) -> Word:
        """
        Validate an action against the current state.

        Nothing is modified when validation fails.
        """
        if self._corruption is not None:
            raise self._corruption
        if self.finished or self.card_state != expected:
            logger.warning(
                "invalid_transition",
                list_id=self.list_id,
                state=self.state,
                action=action,
            )
            raise InvalidTransitionError(self.state, action)
        return self._resolve_current()

    def _complete(
        self,
        mutated: Word,
        action: str,
        queue_add: bool = False,
        queue_remove: bool = False
    ) -> TransitionResult:
        """Finish the current card and advance the cursor."""
        counts_toward_daily = self.mode == Mode.MEMORIZE

        self.stats.completed += 1
        self.stats.by_action[action] = self.stats.by_action.get(action, 0) + 1
        if action == "mastered":
            self.stats.mastered += 1
        else:
            self.stats.failed += 1
        if counts_toward_daily:
            self.stats.daily_progress += 1

        self.position += 1
        self.card_state = CardState.QUESTION

        if self.finished:
            logger.info(
                "session_finished",
                list_id=self.list_id,
                mode=self.mode.value,
                completed=self.stats.completed,
                mastered=self.stats.mastered,
                by_action=dict(self.stats.by_action),
            )

        return TransitionResult(
            mutated_word=mutated,
            queue_add=queue_add,
            queue_remove=queue_remove,
            session_advanced=True,
            finished=self.finished,
            counts_toward_daily=counts_toward_daily,
        )


def start_session(
    word_list: WordList,
    mode: Mode,
    now: int,
    rng: Optional[random.Random] = None,
    clock: Optional[Clock] = None
) -> LearningSession:
    """
    Build a snapshot queue for the list and wrap it in a session.

    An empty selection yields a session that is already finished.
    """
    queue = build_queue(word_list, mode, now, rng=rng)
    return LearningSession(queue, mode, clock=clock, list_id=word_list.id)


# ---- Function-style API ----

def current_card(session: LearningSession) -> Optional[Word]:
    return session.current_card()


def submit_known(session: LearningSession) -> TransitionResult:
    return session.submit_known()


def submit_unknown(session: LearningSession) -> TransitionResult:
    return session.submit_unknown()


def confirm_got_it(session: LearningSession) -> TransitionResult:
    return session.confirm_got_it()


def confirm_mastered(session: LearningSession) -> TransitionResult:
    return session.confirm_mastered()


def confirm_review_later(session: LearningSession) -> TransitionResult:
    return session.confirm_review_later()


def confirm_still_unknown(session: LearningSession) -> TransitionResult:
    return session.confirm_still_unknown()
