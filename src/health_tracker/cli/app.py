"""Shared Typer app object, shared option types, and store utility."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..core.engine.config_loader import load_settings
from ..io.history_store import HistoryStore, get_default_data_path
from ..logging_config import setup_logging

# Shared --data-path option type used across all commands
DataPathOption = Annotated[
    Optional[Path],
    typer.Option("--data-path", "-p", help="Path to the JSON data file"),
]

# Shared --date option type for logging commands
DateOption = Annotated[
    Optional[str],
    typer.Option("--date", "-d", help="Date (YYYY-MM-DD, default: today)"),
]

app = typer.Typer(
    name="health-tracker",
    help="Track body weight and daily exercise, and keep your sport streak going.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """
    Track body weight and daily exercise.
    """
    level = "DEBUG" if verbose else load_settings().log_level
    setup_logging(level)


def get_store(data_path: Path | None) -> HistoryStore:
    """Get history store from path or the configured default location."""
    if data_path is None:
        data_path = get_default_data_path(load_settings().data_dir)
    return HistoryStore(data_path)
