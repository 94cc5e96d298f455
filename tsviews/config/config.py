"""
Configuration management for tsviews.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = False


@dataclass
class ViewConfig:
    """
    View behaviour configuration.

    check_mutation:
        When True every view compares the source TimeSeries version on each
        step and raises ConcurrentModificationError if it changed. Turning it
        off trades that guard for one less attribute read per step.
    """
    check_mutation: bool = True


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables (and a .env file when
    present) and provides typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.log = self._load_log_config()
        self.views = self._load_view_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR", "logs"),
            log_to_file=_env_flag("TSVIEWS_LOG_TO_FILE", "false"),
        )

    def _load_view_config(self) -> ViewConfig:
        """Load view configuration from environment."""
        return ViewConfig(
            check_mutation=_env_flag("TSVIEWS_CHECK_MUTATION", "true"),
        )


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    Config._instance = None
