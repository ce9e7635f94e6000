"""
Data models for health-tracker.

A History maps calendar dates to Day records.  Both are plain values:
operations in core.history return new instances instead of mutating.
"""

from dataclasses import dataclass, field
from datetime import date

from .config import BIKING_STREAK_THRESHOLD_KM


@dataclass(frozen=True)
class Day:
    """
    Observations for one calendar day.

    weight and biking are None when nothing was logged for that day.
    """

    weight: float | None = None  # kg
    workout: bool = False  # short workout done
    training: bool = False  # full training session done
    biking: float | None = None  # km
    cheatday: bool = False

    def is_active(self, threshold: float = BIKING_STREAK_THRESHOLD_KM) -> bool:
        """Return True if the day counts towards the sport streak."""
        return (
            self.workout
            or self.training
            or (self.biking is not None and self.biking >= threshold)
        )

    def is_empty(self) -> bool:
        """True if no field has been set."""
        return self == Day()


@dataclass
class History:
    """
    All recorded days, keyed by date.

    Key order carries no meaning; use sorted_dates() for display order.
    """

    days: dict[date, Day] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "History":
        return cls(days={})

    def get(self, day: date) -> Day | None:
        return self.days.get(day)

    def sorted_dates(self) -> list[date]:
        return sorted(self.days)

    def with_day(self, day: date, record: Day) -> "History":
        """Return a copy of this history with *record* stored under *day*."""
        days = dict(self.days)
        days[day] = record
        return History(days=days)

    def __len__(self) -> int:
        return len(self.days)

    def __contains__(self, day: object) -> bool:
        return day in self.days


@dataclass(frozen=True)
class TableRow:
    """A single row of the history table, values left unformatted."""

    date: date
    weight: float | None
    workout: bool
    training: bool
    biking: float | None
    cheatday: bool


@dataclass
class AnalysisResult:
    """Everything the analyze command displays."""

    rows: list[TableRow]
    streak: int
    reference_date: date
    latest_weight: tuple[date, float] | None = None
    biking_total_km: float = 0.0
