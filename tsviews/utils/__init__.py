"""
Utility modules.
"""

from .logger import get_logger, setup_logger, TimeSeriesLogger, format_view_event
from .offsets import add_offset

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "TimeSeriesLogger",
    "format_view_event",
    # Cursor arithmetic
    "add_offset",
]
