"""
Merge-on-write updates for the day history.

Each logging command contributes to a day's record instead of replacing it:
- weight replaces only the weight field
- boolean activity flags are OR-merged, so a flag once set stays set
- biking distance is overwritten only by a new, present value
"""

from dataclasses import replace
from datetime import date

from .models import Day, History


def log_weight(history: History, day: date, weight: float) -> History:
    """
    Record the weight for a day.

    Args:
        history: Current history (not modified)
        day: Calendar date of the measurement
        weight: Body weight in kg

    Returns:
        New History with the day's weight set, all other fields kept
    """
    existing = history.get(day)
    if existing is None:
        record = Day(weight=weight)
    else:
        record = replace(existing, weight=weight)
    return history.with_day(day, record)


def merge_sport(
    existing: Day,
    workout: bool = False,
    training: bool = False,
    biking: float | None = None,
    cheatday: bool = False,
) -> Day:
    """
    Merge activity values into an existing day record.

    Args:
        existing: Record already stored for the day
        workout: Short workout done
        training: Full training session done
        biking: Distance biked in km, None if not logged in this call
        cheatday: Day marked as a dietary exception

    Returns:
        Merged Day; weight is carried over unchanged
    """
    return Day(
        weight=existing.weight,
        workout=existing.workout or workout,
        training=existing.training or training,
        biking=biking if biking is not None else existing.biking,
        cheatday=existing.cheatday or cheatday,
    )


def log_sport(
    history: History,
    day: date,
    workout: bool = False,
    training: bool = False,
    biking: float | None = None,
    cheatday: bool = False,
) -> History:
    """
    Record activity for a day, merging with anything already logged.

    A call that sets nothing on a day without a record leaves the
    history unchanged, so no empty records are ever stored.

    Returns:
        New History with the merged record
    """
    existing = history.get(day)
    if existing is None:
        record = Day(
            workout=workout,
            training=training,
            biking=biking,
            cheatday=cheatday,
        )
        if record.is_empty():
            return history
    else:
        record = merge_sport(existing, workout, training, biking, cheatday)
    return history.with_day(day, record)
