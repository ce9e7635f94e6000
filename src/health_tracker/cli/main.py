"""
CLI entry point using Typer.

Provides commands for health tracking:
- weight: Log body weight for a day
- sport: Log workout, training, biking or a cheat day
- analyze: Show the history table and the current sport streak
"""

from .app import app
from .commands import analysis, tracking  # noqa: F401  (registers commands)


if __name__ == "__main__":
    app()
