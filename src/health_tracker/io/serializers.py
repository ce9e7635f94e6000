"""
JSON serialization for the day history.

Handles conversion between the dataclasses and JSON-compatible dicts,
and parsing of user-supplied dates.
"""

import json
import re
from datetime import date, datetime
from typing import Any

from ..core.config import DATE_FORMAT, STORE_FORMAT_VERSION
from ..core.models import Day, History


class HealthTrackerError(Exception):
    """Base class for all health-tracker errors."""

    pass


class FormatError(HealthTrackerError):
    """Raised when stored data cannot be decoded."""

    pass


class DateParseError(HealthTrackerError):
    """Raised when a date string does not match YYYY-MM-DD."""

    pass


_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def parse_date(date_str: str | None, today: date | None = None) -> date:
    """
    Parse a YYYY-MM-DD string into a date.

    Args:
        date_str: Date string, or None for today
        today: Value used for None (default: local date.today())

    Returns:
        Parsed date

    Raises:
        DateParseError: If the string is not a valid YYYY-MM-DD date
    """
    if date_str is None:
        return today if today is not None else date.today()

    if not _DATE_RE.match(date_str):
        raise DateParseError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")

    try:
        return datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(f"Invalid date: {date_str}") from e


def format_date(day: date) -> str:
    return day.strftime(DATE_FORMAT)


def _optional_float(data: dict[str, Any], key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FormatError(f"{key} must be a number or null, got {value!r}")
    return float(value)


def _flag(data: dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise FormatError(f"{key} must be true or false, got {value!r}")
    return value


def day_to_dict(day: Day) -> dict[str, Any]:
    """
    Convert Day to JSON-compatible dict.

    Absent measurements are written as null.
    """
    return {
        "weight": day.weight,
        "workout": day.workout,
        "training": day.training,
        "biking": day.biking,
        "cheatday": day.cheatday,
    }


def dict_to_day(data: dict[str, Any]) -> Day:
    """
    Convert dict to Day.

    Every field is optional so that files written before a field existed
    (e.g. without cheatday or biking) still load.  Unknown keys, such as
    the redundant "date" of older files, are ignored.

    Raises:
        FormatError: If data is not a mapping or a field has the wrong type
    """
    if not isinstance(data, dict):
        raise FormatError(f"Day record must be an object, got {type(data).__name__}")

    return Day(
        weight=_optional_float(data, "weight"),
        workout=_flag(data, "workout"),
        training=_flag(data, "training"),
        biking=_optional_float(data, "biking"),
        cheatday=_flag(data, "cheatday"),
    )


def history_to_dict(history: History) -> dict[str, Any]:
    """Convert History to the on-disk document, days sorted by date."""
    return {
        "version": STORE_FORMAT_VERSION,
        "days": {
            format_date(day): day_to_dict(history.days[day])
            for day in history.sorted_dates()
        },
    }


def dict_to_history(data: Any) -> History:
    """
    Convert an on-disk document to History.

    Accepts the current {"version": 1, "days": {...}} layout as well as
    the older {"map": {...}} wrapper and a bare date → record mapping.

    Raises:
        FormatError: If the document or any record is malformed
    """
    if not isinstance(data, dict):
        raise FormatError(f"History must be an object, got {type(data).__name__}")

    if "days" in data:
        raw_days = data["days"]
    elif "map" in data:
        raw_days = data["map"]
    else:
        raw_days = data

    if not isinstance(raw_days, dict):
        raise FormatError("History days must be an object keyed by date")

    days: dict[date, Day] = {}
    for key, record in raw_days.items():
        try:
            day = parse_date(key)
        except DateParseError as e:
            raise FormatError(f"Invalid date key {key!r}: {e}") from e
        try:
            days[day] = dict_to_day(record)
        except FormatError as e:
            raise FormatError(f"Invalid record for {key}: {e}") from e

    return History(days=days)


def history_to_json(history: History) -> str:
    """Serialize History as pretty-printed JSON text."""
    return json.dumps(history_to_dict(history), indent=2, ensure_ascii=False) + "\n"


def json_to_history(text: str) -> History:
    """
    Parse JSON text into History.

    Raises:
        FormatError: If the text is not valid JSON or not a valid history
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON: {e}") from e
    return dict_to_history(data)
