"""Analysis commands: analyze."""

import json
from typing import Annotated

import typer

from ... import tracker
from ...io.serializers import HealthTrackerError
from .. import views
from ..app import DataPathOption, app, get_store


@app.command()
def analyze(
    data_path: DataPathOption = None,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
) -> None:
    """
    Show all tracked days and the current sport streak.
    """
    store = get_store(data_path)

    try:
        result = tracker.analyze(store=store)
    except HealthTrackerError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps(views.analysis_to_dict(result), indent=2, ensure_ascii=False))
        return

    views.console.print()
    views.print_analysis(result)
    views.console.print()
