"""
Unit tests for the merge-on-write updates and the history queries.

Dates are fixed; no test touches the filesystem.
"""

from datetime import date, timedelta

import pytest

from health_tracker.core.config import BIKING_STREAK_THRESHOLD_KM
from health_tracker.core.history import log_sport, log_weight, merge_sport
from health_tracker.core.metrics import (
    biking_total,
    days_table,
    is_active_day,
    iter_days_backward,
    latest_weight,
    sport_streak,
)
from health_tracker.core.models import Day, History

D = date(2024, 1, 10)


def _history(**days: Day) -> History:
    """Build a History from offsets like d0=Day(...), d1=Day(...) (days before D)."""
    return History(days={D - timedelta(days=int(k[1:])): v for k, v in days.items()})


# ---------------------------------------------------------------------------
# log_weight
# ---------------------------------------------------------------------------


class TestLogWeight:
    def test_new_day_has_defaults(self):
        history = log_weight(History.empty(), D, 70.5)
        assert history.get(D) == Day(
            weight=70.5, workout=False, training=False, biking=None, cheatday=False
        )

    def test_replaces_only_weight(self):
        start = History(days={D: Day(weight=72.0, workout=True, biking=12.0, cheatday=True)})
        history = log_weight(start, D, 71.0)
        assert history.get(D) == Day(weight=71.0, workout=True, biking=12.0, cheatday=True)

    def test_input_history_is_not_mutated(self):
        start = History.empty()
        log_weight(start, D, 70.0)
        assert len(start) == 0

    def test_other_days_untouched(self):
        other = D - timedelta(days=1)
        start = History(days={other: Day(training=True)})
        history = log_weight(start, D, 70.0)
        assert history.get(other) == Day(training=True)
        assert len(history) == 2


# ---------------------------------------------------------------------------
# log_sport
# ---------------------------------------------------------------------------


class TestLogSport:
    def test_new_day(self):
        history = log_sport(History.empty(), D, workout=True, biking=5.0)
        assert history.get(D) == Day(workout=True, biking=5.0)

    def test_flags_are_or_merged(self):
        history = log_sport(History.empty(), D, workout=True)
        history = log_sport(history, D, training=True)
        record = history.get(D)
        assert record.workout is True
        assert record.training is True

    def test_flag_cannot_be_cleared(self):
        history = log_sport(History.empty(), D, cheatday=True)
        history = log_sport(history, D, cheatday=False, workout=True)
        assert history.get(D).cheatday is True

    def test_absent_biking_keeps_previous(self):
        history = log_sport(History.empty(), D, biking=5.0)
        history = log_sport(history, D, workout=True)
        assert history.get(D).biking == 5.0

    def test_present_biking_overwrites(self):
        history = log_sport(History.empty(), D, biking=5.0)
        history = log_sport(history, D, biking=8.0)
        assert history.get(D).biking == 8.0

    def test_weight_untouched(self):
        history = log_weight(History.empty(), D, 70.5)
        history = log_sport(history, D, training=True)
        assert history.get(D).weight == 70.5

    def test_empty_call_creates_no_record(self):
        start = History.empty()
        history = log_sport(start, D)
        assert D not in history
        assert history is start

    def test_empty_call_on_existing_day_keeps_record(self):
        history = log_sport(History.empty(), D, training=True)
        history = log_sport(history, D)
        assert history.get(D) == Day(training=True)

    def test_merge_sport_directly(self):
        merged = merge_sport(Day(weight=80.0, biking=3.0), training=True, biking=None)
        assert merged == Day(weight=80.0, training=True, biking=3.0)


def test_weight_then_sport_end_to_end():
    history = log_weight(History.empty(), date(2024, 1, 1), 70.5)
    assert history.get(date(2024, 1, 1)) == Day(weight=70.5)

    history = log_sport(history, date(2024, 1, 1), workout=True)
    assert history.get(date(2024, 1, 1)) == Day(weight=70.5, workout=True)
    assert len(history) == 1


# ---------------------------------------------------------------------------
# Streak
# ---------------------------------------------------------------------------


class TestSportStreak:
    def test_three_active_days(self):
        history = _history(d0=Day(workout=True), d1=Day(workout=True), d2=Day(workout=True))
        assert sport_streak(history, D) == 3

    def test_stops_at_inactive_day(self):
        history = _history(
            d0=Day(workout=True),
            d1=Day(training=True),
            d2=Day(workout=True),
            d3=Day(weight=70.0),
            d4=Day(workout=True),
        )
        assert sport_streak(history, D) == 3

    def test_missing_day_is_zero(self):
        assert sport_streak(History.empty(), D) == 0

    def test_inactive_reference_day_is_zero(self):
        history = _history(d0=Day(cheatday=True, weight=70.0), d1=Day(workout=True))
        assert sport_streak(history, D) == 0

    def test_gap_breaks_streak(self):
        history = _history(d0=Day(workout=True), d2=Day(workout=True))
        assert sport_streak(history, D) == 1

    def test_future_days_are_ignored(self):
        history = History(days={D: Day(workout=True), D + timedelta(days=1): Day(workout=True)})
        assert sport_streak(history, D) == 1

    @pytest.mark.parametrize(
        "km, expected",
        [(BIKING_STREAK_THRESHOLD_KM, 1), (9.99, 0), (25.0, 1)],
    )
    def test_biking_threshold(self, km, expected):
        history = _history(d0=Day(biking=km))
        assert sport_streak(history, D) == expected

    def test_custom_threshold(self):
        history = _history(d0=Day(biking=5.0))
        assert sport_streak(history, D, threshold=5.0) == 1
        assert sport_streak(history, D, threshold=5.1) == 0

    def test_long_streak_does_not_recurse(self):
        days = {D - timedelta(days=i): Day(training=True) for i in range(5000)}
        assert sport_streak(History(days=days), D) == 5000

    def test_is_active_day_none(self):
        assert is_active_day(None) is False

    def test_iter_days_backward(self):
        it = iter_days_backward(date(2024, 3, 1))
        assert [next(it) for _ in range(3)] == [
            date(2024, 3, 1),
            date(2024, 2, 29),
            date(2024, 2, 28),
        ]

    def test_iter_days_backward_stops_at_min(self):
        assert list(iter_days_backward(date.min)) == [date.min]


# ---------------------------------------------------------------------------
# Table projection
# ---------------------------------------------------------------------------


class TestDaysTable:
    def test_rows_sorted_ascending(self):
        history = History(
            days={
                date(2024, 1, 3): Day(workout=True),
                date(2024, 1, 1): Day(weight=70.0),
                date(2024, 1, 2): Day(biking=12.0, cheatday=True),
            }
        )
        rows = days_table(history)
        assert [r.date for r in rows] == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]
        assert rows[0].weight == 70.0
        assert rows[0].biking is None
        assert rows[1].biking == 12.0
        assert rows[1].cheatday is True
        assert rows[2].workout is True

    def test_empty(self):
        assert days_table(History.empty()) == []

    def test_latest_weight_skips_days_without_weight(self):
        history = History(
            days={
                date(2024, 1, 1): Day(weight=71.0),
                date(2024, 1, 2): Day(weight=70.5),
                date(2024, 1, 3): Day(workout=True),
            }
        )
        assert latest_weight(history) == (date(2024, 1, 2), 70.5)
        assert latest_weight(History.empty()) is None

    def test_biking_total(self):
        history = _history(d0=Day(biking=12.5), d1=Day(workout=True), d2=Day(biking=7.5))
        assert biking_total(history) == pytest.approx(20.0)
        assert biking_total(History.empty()) == 0.0
