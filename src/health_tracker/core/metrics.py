"""
Queries over the day history: sport streak and table projection.
"""

from collections.abc import Iterator
from datetime import date, timedelta

from .config import BIKING_STREAK_THRESHOLD_KM
from .models import Day, History, TableRow


def is_active_day(day: Day | None, threshold: float = BIKING_STREAK_THRESHOLD_KM) -> bool:
    """A missing record is never active."""
    return day is not None and day.is_active(threshold)


def iter_days_backward(start: date) -> Iterator[date]:
    """Yield start, start - 1 day, start - 2 days, ... until date.min."""
    current = start
    while True:
        yield current
        if current == date.min:
            return
        current -= timedelta(days=1)


def sport_streak(
    history: History,
    reference_date: date,
    threshold: float = BIKING_STREAK_THRESHOLD_KM,
) -> int:
    """
    Count consecutive active days ending at reference_date.

    Walks backward one calendar day at a time and stops at the first
    missing or inactive day.  Equivalent to
    streak(d) = 0 if d is inactive else 1 + streak(d - 1 day),
    evaluated without recursion.

    Args:
        history: Day history
        reference_date: Last day of the streak (usually today)
        threshold: Minimum biking distance in km for an active day

    Returns:
        Streak length in days (0 if reference_date is inactive)
    """
    streak = 0
    for day in iter_days_backward(reference_date):
        if not is_active_day(history.get(day), threshold):
            break
        streak += 1
    return streak


def days_table(history: History) -> list[TableRow]:
    """
    Project the history into table rows sorted by ascending date.
    """
    rows: list[TableRow] = []
    for day in history.sorted_dates():
        record = history.days[day]
        rows.append(
            TableRow(
                date=day,
                weight=record.weight,
                workout=record.workout,
                training=record.training,
                biking=record.biking,
                cheatday=record.cheatday,
            )
        )
    return rows


def latest_weight(history: History) -> tuple[date, float] | None:
    """Most recent (date, weight) pair, or None if no weight was ever logged."""
    for day in reversed(history.sorted_dates()):
        weight = history.days[day].weight
        if weight is not None:
            return day, weight
    return None


def biking_total(history: History) -> float:
    """Total biked distance in km over the whole history."""
    return sum((d.biking for d in history.days.values() if d.biking is not None), 0.0)
