"""
Configuration constants for the health tracker.

Defaults live here; user overrides are merged in by
core.engine.config_loader.
"""

from typing import Final

# =============================================================================
# STORAGE
# =============================================================================

APP_NAME: Final[str] = "health-tracker"
DATA_FILE_NAME: Final[str] = "data.json"
CONFIG_FILE_NAME: Final[str] = "config.yaml"
STORE_FORMAT_VERSION: Final[int] = 1

# =============================================================================
# DATES
# =============================================================================

DATE_FORMAT: Final[str] = "%Y-%m-%d"  # e.g. 2024-01-01

# =============================================================================
# STREAK
# =============================================================================

BIKING_STREAK_THRESHOLD_KM: Final[float] = 10.0  # min distance for an active day

# =============================================================================
# DISPLAY
# =============================================================================

CHECK_MARK: Final[str] = "✔"
FAIL_MARK: Final[str] = "✘"
