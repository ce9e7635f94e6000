"""
Tracking operations: load the history, apply one change, save it back.

These are the entry points used by the CLI.  Each call is a complete
load → transform → save cycle and returns plain data for display.
Dates are parsed before the store is touched, so an invalid date never
changes the data file.  "Today" is the local calendar date.
"""

import logging
from datetime import date

from .core import history as history_ops
from .core.engine.config_loader import load_settings
from .core.metrics import biking_total, days_table, latest_weight, sport_streak
from .core.models import AnalysisResult, Day
from .io.history_store import HistoryStore, get_default_store
from .io.serializers import parse_date

logger = logging.getLogger(__name__)


def _resolve_store(store: HistoryStore | None) -> HistoryStore:
    if store is not None:
        return store
    return get_default_store(load_settings().data_dir)


def log_weight(
    weight: float,
    date_str: str | None = None,
    store: HistoryStore | None = None,
) -> Day:
    """
    Log the body weight for a day.

    Args:
        weight: Body weight in kg
        date_str: YYYY-MM-DD, None for today
        store: Store to use (default: the per-user data file)

    Returns:
        The day's record after the update

    Raises:
        DateParseError: If date_str is invalid (store untouched)
        StorageError, FormatError: If the store cannot be loaded or saved
    """
    day = parse_date(date_str)
    store = _resolve_store(store)

    history = history_ops.log_weight(store.load(), day, weight)
    store.save(history)

    logger.info("Logged weight %.1f kg for %s", weight, day)
    return history.days[day]


def log_sport(
    workout: bool = False,
    training: bool = False,
    biking: float | None = None,
    cheatday: bool = False,
    date_str: str | None = None,
    store: HistoryStore | None = None,
) -> Day | None:
    """
    Log activity for a day, merging with what is already recorded.

    Returns:
        The day's record after the update, or None if nothing was
        logged and the day had no record

    Raises:
        DateParseError: If date_str is invalid (store untouched)
        StorageError, FormatError: If the store cannot be loaded or saved
    """
    day = parse_date(date_str)
    store = _resolve_store(store)

    before = store.load()
    history = history_ops.log_sport(
        before,
        day,
        workout=workout,
        training=training,
        biking=biking,
        cheatday=cheatday,
    )
    if history is before:
        logger.info("Nothing to log for %s", day)
        return None
    store.save(history)

    logger.info(
        "Logged sport for %s (workout=%s training=%s biking=%s cheatday=%s)",
        day, workout, training, biking, cheatday,
    )
    return history.days[day]


def analyze(
    store: HistoryStore | None = None,
    today: date | None = None,
    threshold: float | None = None,
) -> AnalysisResult:
    """
    Build the history table and the current sport streak.

    Args:
        store: Store to use (default: the per-user data file)
        today: Reference date for the streak (default: local today)
        threshold: Biking distance for an active day (default: from config)

    Returns:
        AnalysisResult with rows sorted by date
    """
    settings = load_settings()
    if store is None:
        store = get_default_store(settings.data_dir)
    if threshold is None:
        threshold = settings.biking_threshold_km
    reference = today if today is not None else date.today()

    history = store.load()
    return AnalysisResult(
        rows=days_table(history),
        streak=sport_streak(history, reference, threshold),
        reference_date=reference,
        latest_weight=latest_weight(history),
        biking_total_km=biking_total(history),
    )
