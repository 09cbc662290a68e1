#!/usr/bin/env python3
"""Loguru-based logging for the polygon.io client.

Basic Usage Examples:
    from polygon_client.utils.loguru_setup import logger

    logger.configure_level("INFO")  # or DEBUG, WARNING, ERROR, CRITICAL

    # Or use environment variable
    # export POLYGON_LOG_LEVEL=DEBUG

    logger.debug("Debug message")
    logger.info("Status: <green>connected</green>")

Environment Variables:
    POLYGON_LOG_LEVEL: Global log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    POLYGON_LOG_FILE: Optional log file path for file output
    POLYGON_DISABLE_COLORS: Set to "true" to disable colored output
"""

import logging
import os
import sys
from pathlib import Path

from loguru import logger as _loguru_logger

# Remove default loguru handler to have full control
_loguru_logger.remove()

DEFAULT_LOG_LEVEL = os.getenv("POLYGON_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("POLYGON_LOG_FILE")
DISABLE_COLORS = os.getenv("POLYGON_DISABLE_COLORS", "false").lower() == "true"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

SIMPLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

LEVEL_NAMES = {10: "DEBUG", 20: "INFO", 30: "WARNING", 40: "ERROR", 50: "CRITICAL"}


class PolygonLogger:
    """Thin wrapper around loguru with environment-based configuration."""

    def __init__(self) -> None:
        self._current_level = DEFAULT_LOG_LEVEL
        self._log_file = LOG_FILE
        self._disable_colors = DISABLE_COLORS
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Set up loguru sinks with the current configuration."""
        _loguru_logger.remove()

        format_template = SIMPLE_FORMAT if self._disable_colors else LOG_FORMAT

        _loguru_logger.add(
            sys.stderr,
            level=self._current_level,
            format=format_template,
            colorize=not self._disable_colors,
            backtrace=True,
            diagnose=False,
        )

        if self._log_file:
            log_path = Path(self._log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            _loguru_logger.add(
                str(log_path),
                level=self._current_level,
                format=SIMPLE_FORMAT,
                rotation="10 MB",
                retention="1 week",
                compression="zip",
                backtrace=True,
                diagnose=False,
            )

    def configure_level(self, level: str | int) -> "PolygonLogger":
        """Configure the log level.

        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or numeric level

        Returns:
            Self for method chaining

        Raises:
            ValueError: If loguru has no level of that name
        """
        if isinstance(level, int):
            level = LEVEL_NAMES.get(level, "INFO")
        level = level.upper()
        _loguru_logger.level(level)  # unknown names raise before any sink is removed
        self._current_level = level
        self._setup_logger()
        return self

    def configure_file(self, log_file: str | Path | None) -> "PolygonLogger":
        """Configure file logging.

        Args:
            log_file: Path to log file, or None to disable file logging

        Returns:
            Self for method chaining
        """
        self._log_file = str(log_file) if log_file else None
        self._setup_logger()
        return self

    @property
    def level(self) -> str:
        """Name of the level currently applied to every sink."""
        return self._current_level

    # Records are attributed to the caller, not to this wrapper
    def debug(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).debug(message, *args, **kwargs)
        return self

    def info(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).info(message, *args, **kwargs)
        return self

    def warning(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).warning(message, *args, **kwargs)
        return self


logger = PolygonLogger()


def configure_level(level: str) -> None:
    """Configure the global logger level."""
    logger.configure_level(level)


def suppress_http_logging(suppress: bool = True) -> None:
    """Control transport library logging globally.

    Sets the stdlib logging level for httpcore, httpx and websockets.

    Args:
        suppress: If True, set to WARNING (quiet). If False, set to DEBUG (verbose).
    """
    level = logging.WARNING if suppress else logging.DEBUG
    for logger_name in ("httpcore", "httpx", "websockets"):
        logging.getLogger(logger_name).setLevel(level)
