"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of the day history.
"""

from rich.console import Console
from rich.table import Table

from ..core.config import CHECK_MARK, FAIL_MARK
from ..core.models import AnalysisResult, Day, TableRow
from ..io.serializers import format_date

console = Console()


def format_mark(value: bool) -> str:
    """Render a flag as a check or cross mark."""
    return f"[green]{CHECK_MARK}[/green]" if value else f"[red]{FAIL_MARK}[/red]"


def format_number(value: float | None) -> str:
    """Blank for absent values, otherwise the number without trailing zeros."""
    if value is None:
        return ""
    return f"{value:g}"


def format_days_table(rows: list[TableRow]) -> Table:
    """
    Create a Rich table displaying the day history.

    Args:
        rows: Rows sorted by date

    Returns:
        Rich Table object
    """
    table = Table(title="Health History")

    table.add_column("date", style="cyan")
    table.add_column("weight [kg]", justify="right")
    table.add_column("workout", justify="center")
    table.add_column("training", justify="center")
    table.add_column("biking [km]", justify="right")
    table.add_column("cheat day", justify="center")

    for row in rows:
        table.add_row(
            format_date(row.date),
            format_number(row.weight),
            format_mark(row.workout),
            format_mark(row.training),
            format_number(row.biking),
            format_mark(row.cheatday),
        )

    return table


def print_analysis(result: AnalysisResult) -> None:
    """
    Print the history table followed by the summary lines.

    Args:
        result: Analysis to display
    """
    if not result.rows:
        console.print("[yellow]No days recorded yet.[/yellow]")
    else:
        console.print(format_days_table(result.rows))

    console.print()
    if result.latest_weight is not None:
        day, weight = result.latest_weight
        console.print(f"Latest weight: [bold]{weight:g} kg[/bold] ({format_date(day)})")
    if result.biking_total_km > 0:
        console.print(f"Total biking: [bold]{result.biking_total_km:g} km[/bold]")
    console.print(f"Current sport streak: [bold]{result.streak}[/bold]")


def analysis_to_dict(result: AnalysisResult) -> dict:
    """JSON-compatible view of an analysis for --json output."""
    latest = None
    if result.latest_weight is not None:
        day, weight = result.latest_weight
        latest = {"date": format_date(day), "weight": weight}
    return {
        "reference_date": format_date(result.reference_date),
        "streak": result.streak,
        "latest_weight": latest,
        "biking_total_km": result.biking_total_km,
        "days": [
            {
                "date": format_date(row.date),
                "weight": row.weight,
                "workout": row.workout,
                "training": row.training,
                "biking": row.biking,
                "cheatday": row.cheatday,
            }
            for row in result.rows
        ],
    }


def format_day_summary(record: Day) -> str:
    """One-line summary of a day record, e.g. '70.5 kg, workout, 12 km'."""
    parts: list[str] = []
    if record.weight is not None:
        parts.append(f"{record.weight:g} kg")
    if record.workout:
        parts.append("workout")
    if record.training:
        parts.append("training")
    if record.biking is not None:
        parts.append(f"biking {record.biking:g} km")
    if record.cheatday:
        parts.append("cheat day")
    return ", ".join(parts)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")
