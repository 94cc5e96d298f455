"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    reset_config,
    LogConfig,
    ViewConfig,
)

__all__ = [
    "Config",
    "get_config",
    "reset_config",
    "LogConfig",
    "ViewConfig",
]
