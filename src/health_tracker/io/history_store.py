"""
JSON-file storage for the day history.

The whole history is read at the start of every command and written back
in full afterwards.
"""

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from ..core.config import APP_NAME, DATA_FILE_NAME
from ..core.models import History
from .serializers import FormatError, HealthTrackerError, history_to_json, json_to_history

logger = logging.getLogger(__name__)


class StorageError(HealthTrackerError):
    """Raised when the data file cannot be located, read or written."""

    pass


class HistoryStore:
    """
    Manages the day history stored as a single JSON document.

    Writes go to a temporary file in the same directory which then
    replaces the data file, so a crash mid-write never truncates it.
    Concurrent invocations are not serialized: the last writer wins.
    """

    def __init__(self, data_path: str | Path):
        """
        Initialize the history store.

        Args:
            data_path: Path to the JSON data file
        """
        self.data_path = Path(data_path)

    def exists(self) -> bool:
        """Check if the data file exists."""
        return self.data_path.exists()

    def load(self) -> History:
        """
        Load the history from disk.

        Returns:
            Stored History, or an empty one if the file was never written

        Raises:
            StorageError: If the file exists but cannot be read
            FormatError: If the file contents are not a valid history
        """
        if not self.data_path.exists():
            logger.debug("No data file at %s, starting empty", self.data_path)
            return History.empty()

        try:
            text = self.data_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"{self.data_path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read {self.data_path}: {e}") from e

        history = json_to_history(text)
        logger.debug("Loaded %d days from %s", len(history), self.data_path)
        return history

    def save(self, history: History) -> None:
        """
        Write the full history, replacing the previous contents.

        Creates parent directories if needed.

        Raises:
            StorageError: On any I/O failure; the previous file is left intact
        """
        payload = history_to_json(history)
        temp_path: Path | None = None
        try:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                "w",
                dir=self.data_path.parent,
                prefix=f".{self.data_path.name}.",
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as tmp:
                temp_path = Path(tmp.name)
                tmp.write(payload)
            temp_path.replace(self.data_path)
        except OSError as e:
            if temp_path is not None and temp_path.exists():
                temp_path.unlink()
            raise StorageError(f"Cannot write {self.data_path}: {e}") from e

        logger.debug("Saved %d days to %s", len(history), self.data_path)


def get_default_data_dir() -> Path:
    """
    Get the per-user data directory.

    Returns:
        $XDG_DATA_HOME/health-tracker, or ~/.local/share/health-tracker
    """
    base = os.environ.get("XDG_DATA_HOME")
    root = Path(base) if base else Path.home() / ".local" / "share"
    return root / APP_NAME


def get_default_data_path(data_dir: Path | None = None) -> Path:
    """
    Get the data file path.

    Args:
        data_dir: Directory override (e.g. from config), None for the default
    """
    return (data_dir or get_default_data_dir()) / DATA_FILE_NAME


def get_default_store(data_dir: Path | None = None) -> HistoryStore:
    """
    Get a HistoryStore with the default path.

    Returns:
        HistoryStore instance
    """
    return HistoryStore(get_default_data_path(data_dir))
