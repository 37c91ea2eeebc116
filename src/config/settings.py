"""
Configuration settings for the date helpers.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
when loaded, so a bad timezone name fails immediately rather than on the first
naive timestamp that needs it.

**What is configurable**:
  - The "local" timezone. Naive input (a datetime or string without an
    offset) is interpreted in this zone, and calendar questions that the
    date helpers answer "in local time" (e.g. which year an instant falls in)
    are answered in this zone. Defaults to UTC so results do not depend on
    the host machine.
  - The logging level for the `src` logger tree.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

# Load .env from project root (dev/local environments); a missing file is a no-op
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


DEFAULT_LOCAL_TZ = "UTC"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class DateSettings:
    """
    Configuration for how instants are interpreted.

    Attributes:
        local_tz: IANA timezone name used as the local frame
                  (e.g. "UTC", "Europe/Minsk", "America/New_York").
    """
    local_tz: str = DEFAULT_LOCAL_TZ

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.local_tz:
            raise ValueError(
                "DATE_TASKS_LOCAL_TZ must not be empty. "
                "Unset it to use the default (UTC)."
            )
        try:
            ZoneInfo(self.local_tz)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(
                f"DATE_TASKS_LOCAL_TZ must be an IANA timezone name, got: {self.local_tz}"
            )

    @classmethod
    def from_env(cls) -> "DateSettings":
        """
        Load date settings from environment variables.

        **Environment variables**:
          - DATE_TASKS_LOCAL_TZ (optional): IANA zone for the local frame.
            Defaults to "UTC" if not set.

        Returns:
            DateSettings object with values loaded from environment.

        Raises:
            ValueError: If DATE_TASKS_LOCAL_TZ names an unknown zone.
        """
        return cls(local_tz=os.getenv("DATE_TASKS_LOCAL_TZ", DEFAULT_LOCAL_TZ))


@dataclass(frozen=True)
class LoggingSettings:
    """
    Configuration for log output.

    Attributes:
        level: Standard logging level name ("DEBUG", "INFO", "WARNING", ...).
    """
    level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        """Validate settings after initialization."""
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ValueError(
                f"DATE_TASKS_LOG_LEVEL must be a logging level name, got: {self.level}"
            )

    @property
    def numeric_level(self) -> int:
        return logging.getLevelName(self.level.upper())

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """
        Load logging settings from environment variables.

        **Environment variables**:
          - DATE_TASKS_LOG_LEVEL (optional): Defaults to "WARNING" if not set.
        """
        return cls(level=os.getenv("DATE_TASKS_LOG_LEVEL", DEFAULT_LOG_LEVEL))


@dataclass(frozen=True)
class Settings:
    """
    Global settings, aggregating the subsystem settings.

    **Usage pattern**:
      ```python
      from src.config.settings import get_settings

      settings = get_settings()
      settings.dates.local_tz  # "UTC" unless configured
      ```

    Attributes:
        dates: How naive and local-frame instants are interpreted.
        log: Log level for the package loggers.
    """
    dates: DateSettings = field(default_factory=DateSettings)
    log: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Raises:
            ValueError: If any subsystem setting is invalid.
        """
        return cls(
            dates=DateSettings.from_env(),
            log=LoggingSettings.from_env(),
        )


# Loaded lazily on first get_settings() call. Tests call reset_settings().
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached for reuse.
    Tests can bypass this by passing their own Settings objects, or call
    reset_settings() after changing environment variables.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds an invalid setting.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("DATE_TASKS_LOCAL_TZ", "Europe/Minsk")
          reset_settings()
          assert get_settings().dates.local_tz == "Europe/Minsk"
      ```
    """
    global _default_settings
    _default_settings = None
