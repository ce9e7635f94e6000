"""
YAML → typed settings loader.

Defaults come from core/config.py; a user file at
$XDG_CONFIG_HOME/health-tracker/config.yaml may override them.
HEALTH_TRACKER_CONFIG points at an alternative file.

Usage:
    from health_tracker.core.engine.config_loader import load_settings
    settings = load_settings()
    threshold = settings.biking_threshold_km

If the user file cannot be parsed, a warning is logged and the defaults
are used (no crash).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..config import APP_NAME, BIKING_STREAK_THRESHOLD_KM, CONFIG_FILE_NAME

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HEALTH_TRACKER_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Resolved user settings."""

    biking_threshold_km: float = BIKING_STREAK_THRESHOLD_KM
    data_dir: Path | None = None  # None = platform default
    log_level: str = "WARNING"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML file; return {} and log a warning on any error."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning("Ignoring config file %s: %s", path, e)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a mapping", path)
        return {}
    return data


def _settings_from_dict(data: dict[str, Any]) -> Settings:
    defaults = Settings()

    threshold = defaults.biking_threshold_km
    raw_threshold = data.get("biking_threshold_km")
    if raw_threshold is not None:
        try:
            threshold = float(raw_threshold)
        except (TypeError, ValueError):
            logger.warning("Invalid biking_threshold_km %r, using %s", raw_threshold, threshold)

    data_dir = defaults.data_dir
    if data.get("data_dir"):
        data_dir = Path(str(data["data_dir"])).expanduser()

    log_level = str(data.get("log_level", defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        logger.warning("Invalid log_level %r, using %s", data["log_level"], defaults.log_level)
        log_level = defaults.log_level

    return Settings(
        biking_threshold_km=threshold,
        data_dir=data_dir,
        log_level=log_level,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_config_dir() -> Path:
    """Return $XDG_CONFIG_HOME/health-tracker (default ~/.config/health-tracker)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


def get_user_yaml_path() -> Path | None:
    """Return the user config file if it exists, else None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    p = Path(override).expanduser() if override else get_config_dir() / CONFIG_FILE_NAME
    return p if p.exists() else None


def load_settings() -> Settings:
    """
    Load settings, merging the user YAML file over the defaults.

    Returns:
        Settings; all defaults if no user file exists
    """
    user = get_user_yaml_path()
    if user is None:
        return Settings()
    logger.debug("Loading config from %s", user)
    return _settings_from_dict(_load_yaml_file(user))
