"""Tracking commands: weight and sport."""

import datetime
import json
import math
from typing import Annotated, Optional

import typer

from ... import tracker
from ...io.serializers import DateParseError, HealthTrackerError, day_to_dict, parse_date
from .. import views
from ..app import DataPathOption, DateOption, app, get_store


def _parse_date_option(date_str: str | None) -> datetime.date:
    """Resolve --date, rejecting a malformed value before anything is loaded."""
    try:
        return parse_date(date_str)
    except DateParseError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


@app.command()
def weight(
    weight_kg: Annotated[
        float,
        typer.Argument(metavar="WEIGHT", help="Body weight in kg"),
    ],
    date: DateOption = None,
    data_path: DataPathOption = None,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
) -> None:
    """
    Log your body weight for a day.

      health-tracker weight 70.5 --date 2024-01-01
    """
    day = _parse_date_option(date)

    if not math.isfinite(weight_kg):
        views.print_error("Weight must be a finite number")
        raise typer.Exit(1)

    store = get_store(data_path)

    try:
        record = tracker.log_weight(weight_kg, day.isoformat(), store=store)
    except HealthTrackerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps({"date": day.isoformat(), **day_to_dict(record)}, indent=2))
        return

    views.print_success(f"Logged {weight_kg:g} kg for {day.isoformat()}")


@app.command()
def sport(
    workout: Annotated[
        bool,
        typer.Option("--workout", "-w", help="Did a short workout"),
    ] = False,
    training: Annotated[
        bool,
        typer.Option("--training", "-t", help="Did a full training session"),
    ] = False,
    biking: Annotated[
        Optional[float],
        typer.Option("--biking", "-b", help="Distance biked in km"),
    ] = None,
    cheatday: Annotated[
        bool,
        typer.Option("--cheatday", "-c", help="Mark the day as a cheat day"),
    ] = False,
    date: DateOption = None,
    data_path: DataPathOption = None,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
) -> None:
    """
    Log exercise for a day.

    Repeated calls for the same day add up: flags stay set once logged,
    and a new biking distance replaces the previous one.

      health-tracker sport --workout --biking 12.5
    """
    day = _parse_date_option(date)

    if biking is not None and not (math.isfinite(biking) and biking >= 0):
        views.print_error("Biking distance must be a finite, non-negative number")
        raise typer.Exit(1)

    store = get_store(data_path)

    try:
        record = tracker.log_sport(
            workout=workout,
            training=training,
            biking=biking,
            cheatday=cheatday,
            date_str=day.isoformat(),
            store=store,
        )
    except HealthTrackerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        payload = day_to_dict(record) if record is not None else None
        print(json.dumps({"date": day.isoformat(), "day": payload}, indent=2))
        return

    if record is None:
        views.print_warning(f"Nothing to log for {day.isoformat()}")
        views.print_info("Pass --workout, --training, --biking KM or --cheatday.")
        return

    views.print_success(f"Logged {day.isoformat()}: {views.format_day_summary(record)}")
