"""Core data models for SleepTracker application.

This module contains the sleep night record, the quality rating enum and
the configuration dataclasses used throughout the application.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

from babel import Locale


def current_time_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


# ============================================================================
# Sleep Records
# ============================================================================


class SleepQuality(IntEnum):
    """Quality rating a user gives to a finished night."""

    VERY_BAD = 0
    POOR = 1
    SO_SO = 2
    OK = 3
    PRETTY_GOOD = 4
    EXCELLENT = 5

    def __str__(self) -> str:
        """Return human-readable label."""
        return {
            SleepQuality.VERY_BAD: "Very bad",
            SleepQuality.POOR: "Poor",
            SleepQuality.SO_SO: "So-so",
            SleepQuality.OK: "OK",
            SleepQuality.PRETTY_GOOD: "Pretty good",
            SleepQuality.EXCELLENT: "Excellent",
        }[self]


@dataclass
class SleepNight:
    """One sleep interval.

    A night is open (still in progress) while its end timestamp equals its
    start timestamp. Timestamps are epoch milliseconds.
    """

    start_time_milli: int
    end_time_milli: int
    night_id: int = 0  # 0 until the store assigns a key
    sleep_quality: Optional[SleepQuality] = None
    notes: Optional[str] = None

    @classmethod
    def started_at(cls, time_milli: int) -> SleepNight:
        """Create a new open night starting at the given time."""
        return cls(start_time_milli=time_milli, end_time_milli=time_milli)

    @property
    def is_open(self) -> bool:
        """Check if the night has not been stopped yet."""
        return self.end_time_milli == self.start_time_milli

    @property
    def duration_milli(self) -> int:
        """Length of the night in milliseconds (0 while open)."""
        return self.end_time_milli - self.start_time_milli


# ============================================================================
# Settings Models
# ============================================================================


@dataclass
class LocaleSettings:
    """Locale and time zone used to render dates."""

    locale: Locale = field(default_factory=lambda: Locale.parse("en_US"))
    timezone: ZoneInfo = field(default_factory=lambda: ZoneInfo("UTC"))

    @classmethod
    def from_strings(cls, language: str, timezone_name: str) -> LocaleSettings:
        """Create LocaleSettings from string representations.

        Args:
            language: Language code (e.g., "en", "ja", "en_US", "ja_JP")
            timezone_name: IANA timezone name (e.g., "UTC", "Asia/Tokyo")

        Returns:
            LocaleSettings instance
        """
        locale = Locale.parse(language) if "_" in language else Locale(language)
        timezone = ZoneInfo(timezone_name)
        return cls(locale=locale, timezone=timezone)

    @property
    def locale_string(self) -> str:
        """Get full locale string (e.g., 'en_US', 'ja_JP')."""
        return str(self.locale)

    @property
    def timezone_name(self) -> str:
        """Get timezone name (e.g., 'UTC', 'Asia/Tokyo')."""
        return str(self.timezone)


@dataclass
class WindowGeometry:
    """Main window position and size."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class AppSettings:
    """Application settings persisted between runs."""

    # Database file; None means the default location next to the settings
    database_path: Optional[Path] = None

    locale_settings: LocaleSettings = field(default_factory=LocaleSettings)

    log_level: str = "INFO"

    window_geometry: Optional[WindowGeometry] = None
