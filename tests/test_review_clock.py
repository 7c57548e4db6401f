"""Tests for the interval table and review clock."""

import pytest

from core.scheduling import (
    FALLBACK_INTERVAL_DAYS,
    INTERVAL_DAYS,
    MS_PER_DAY,
    NOT_SCHEDULED,
    Word,
    duration_for_stage,
    is_due,
    next_due_time,
    stage_for,
    time_until_due,
    word_status,
)
from tests.conftest import T0


class TestIntervalTable:
    def test_design_values(self):
        assert [duration_for_stage(s) // MS_PER_DAY for s in range(5)] == [1, 2, 4, 7, 15]

    def test_fallback_past_table(self):
        assert duration_for_stage(len(INTERVAL_DAYS)) == FALLBACK_INTERVAL_DAYS * MS_PER_DAY
        assert duration_for_stage(50) == 30 * MS_PER_DAY

    def test_non_decreasing_then_constant(self):
        durations = [duration_for_stage(stage) for stage in range(12)]
        assert durations == sorted(durations)
        assert len(set(durations[len(INTERVAL_DAYS):])) == 1

    def test_negative_stage_rejected(self):
        with pytest.raises(ValueError):
            duration_for_stage(-1)

    def test_stage_is_mastery_count_minus_one(self):
        assert stage_for(Word(id="w", english="x")) is None
        assert stage_for(Word(id="w", english="x", mastered_dates=(1,))) == 0
        assert stage_for(Word(id="w", english="x", mastered_dates=(1, 2, 3))) == 2


class TestReviewClock:
    def test_never_mastered_is_not_scheduled(self):
        word = Word(id="w", english="x")
        assert next_due_time(word) == NOT_SCHEDULED
        assert time_until_due(word, T0) is None
        assert not is_due(word, T0 + 1000 * MS_PER_DAY)

    def test_due_boundary_at_stage_zero(self):
        word = Word(id="w", english="x", mastered_dates=(T0,))
        assert not is_due(word, T0 + MS_PER_DAY - 1)
        assert is_due(word, T0 + MS_PER_DAY)

    def test_uses_last_mastery_and_stage(self):
        word = Word(id="w", english="x", mastered_dates=(T0, T0 + MS_PER_DAY))
        assert next_due_time(word) == T0 + MS_PER_DAY + 2 * MS_PER_DAY

    def test_time_until_due_negative_when_overdue(self):
        word = Word(id="w", english="x", mastered_dates=(T0,))
        assert time_until_due(word, T0) == MS_PER_DAY
        assert time_until_due(word, T0 + 3 * MS_PER_DAY) == -2 * MS_PER_DAY

    def test_word_status(self):
        new = Word(id="n", english="x")
        mastered = Word(id="m", english="y", mastered_dates=(T0,))
        assert word_status(new, set()).kind == "new"
        assert word_status(new, {"n"}).kind == "queued"
        assert word_status(mastered, {"m"}).kind == "queued"
        status = word_status(mastered, set())
        assert status.kind == "scheduled"
        assert status.due_at == T0 + MS_PER_DAY


class TestWordInvariants:
    def test_decreasing_dates_rejected(self):
        with pytest.raises(ValueError):
            Word(id="w", english="x", mastered_dates=(T0, T0 - 1))

    def test_negative_incorrect_count_rejected(self):
        with pytest.raises(ValueError):
            Word(id="w", english="x", incorrect_count=-1)
