"""Unit tests for core data models."""

import pytest
from babel import Locale
from hypothesis import given
from hypothesis import strategies as st

from sleeptracker.core.models import (
    AppSettings,
    LocaleSettings,
    SleepNight,
    SleepQuality,
    current_time_millis,
)

timestamps = st.integers(min_value=0, max_value=4_102_444_800_000)


class TestSleepNight:
    """Test SleepNight."""

    def test_started_at_is_open(self):
        """A new night starts and ends at the same instant."""
        night = SleepNight.started_at(1_000)
        assert night.start_time_milli == 1_000
        assert night.end_time_milli == 1_000
        assert night.night_id == 0
        assert night.sleep_quality is None
        assert night.notes is None
        assert night.is_open

    @given(start=timestamps, end=timestamps)
    def test_open_iff_end_equals_start(self, start: int, end: int):
        """A night is open exactly when its end equals its start."""
        night = SleepNight(start_time_milli=start, end_time_milli=end)
        assert night.is_open == (start == end)

    @given(start=timestamps, length=st.integers(min_value=1, max_value=86_400_000))
    def test_duration(self, start: int, length: int):
        """Duration is end minus start."""
        night = SleepNight(start_time_milli=start, end_time_milli=start + length)
        assert night.duration_milli == length
        assert not night.is_open

    def test_current_time_millis(self):
        """Current time is reported in milliseconds."""
        assert current_time_millis() > 1_600_000_000_000


class TestSleepQuality:
    """Test SleepQuality."""

    def test_labels(self):
        """Each rating has a human-readable label."""
        assert [str(q) for q in SleepQuality] == [
            "Very bad",
            "Poor",
            "So-so",
            "OK",
            "Pretty good",
            "Excellent",
        ]

    def test_from_int(self):
        """Ratings convert from their integer values."""
        assert SleepQuality(4) is SleepQuality.PRETTY_GOOD
        with pytest.raises(ValueError):
            SleepQuality(6)


class TestLocaleSettings:
    """Test LocaleSettings."""

    def test_defaults(self):
        """Default locale is en_US in UTC."""
        settings = LocaleSettings()
        assert settings.locale_string == "en_US"
        assert settings.timezone_name == "UTC"

    def test_from_strings(self):
        """Locale and time zone parse from strings."""
        settings = LocaleSettings.from_strings("ja_JP", "Asia/Tokyo")
        assert settings.locale == Locale.parse("ja_JP")
        assert settings.timezone_name == "Asia/Tokyo"

    def test_from_language_only(self):
        """A bare language code is accepted."""
        settings = LocaleSettings.from_strings("fr", "Europe/Paris")
        assert settings.locale_string == "fr"


def test_app_settings_defaults():
    """AppSettings defaults."""
    settings = AppSettings()
    assert settings.database_path is None
    assert settings.log_level == "INFO"
    assert settings.window_geometry is None
