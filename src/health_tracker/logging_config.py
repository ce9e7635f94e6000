"""
Logging configuration and utilities.

Provides centralized logging setup for the application.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", logger_name: str = "health_tracker") -> logging.Logger:
    """
    Set up logging for the application.

    Log records go to stderr so they never mix with table or JSON output.

    Args:
        level: Level name, e.g. "DEBUG" or "warning"
        logger_name: Logger to configure (package root by default)

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logger.setLevel(numeric_level)

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
