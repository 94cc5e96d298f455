"""
Logging system for tsviews.
Provides human-readable console logs and an optional dated log file.

Library modules log through ``logging.getLogger(__name__)`` under the
``tsviews`` hierarchy and install no handlers. Call ``setup_logger()`` (or
``get_logger()``) from an application to attach them.
"""

import copy
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import get_config

ROOT_LOGGER_NAME = "tsviews"


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # Color a copy so file handlers sharing the record stay plain text
        record = copy.copy(record)
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


def format_view_event(action: str, view: str, **fields) -> str:
    """
    Build a structured one-line message for a view lifecycle event.

    Example:
        >>> format_view_event("ORDER_VIOLATION", "OrderedTimeSeriesIter", position=3)
        '[VIEW:ORDER_VIOLATION] | view=OrderedTimeSeriesIter | position=3'
    """
    parts = [f"[VIEW:{action}]", f"view={view}"]
    for key, value in fields.items():
        parts.append(f"{key}={value}")
    return " | ".join(parts)


class TimeSeriesLogger:
    """
    Central logging setup for tsviews.

    Features:
    - Console output with colors
    - Optional file output (one file per day)
    - Structured view event messages for easy parsing
    """

    _instance: Optional['TimeSeriesLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "logs", log_level: str = "INFO", log_to_file: bool = False):
        if TimeSeriesLogger._initialized:
            return

        self.log_dir = Path(log_dir)
        self.log_to_file = log_to_file
        self.main_logger = self._create_logger(ROOT_LOGGER_NAME, log_level)

        TimeSeriesLogger._initialized = True

    def _create_logger(self, name: str, level: str) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"tsviews_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    def view_event(self, action: str, view: str, **fields):
        """
        Log a view lifecycle event with structured format.

        Args:
            action: CREATED, EXHAUSTED, ORDER_VIOLATION, UNDEFINED_STEP
            view: View class name
            **fields: Additional context (cursor, window_size, ...)
        """
        self.main_logger.debug(format_view_event(action, view, **fields))


# Global logger instance
_logger: Optional[TimeSeriesLogger] = None


def get_logger() -> TimeSeriesLogger:
    """Get or create the global logger instance from the current config."""
    global _logger
    if _logger is None:
        log_config = get_config().log
        _logger = TimeSeriesLogger(log_config.log_dir, log_config.level, log_config.log_to_file)
    return _logger


def setup_logger(log_dir: str = "logs", log_level: str = "INFO", log_to_file: bool = False) -> TimeSeriesLogger:
    """Initialize the logger with custom settings."""
    global _logger
    TimeSeriesLogger._initialized = False
    TimeSeriesLogger._instance = None
    _logger = TimeSeriesLogger(log_dir, log_level, log_to_file)
    return _logger
