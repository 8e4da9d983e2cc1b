"""Text rendering of sleep nights for the history view.

The history is rendered as a small HTML document so the desktop text view
can show bold labels and line breaks.
"""

from __future__ import annotations

from datetime import datetime, timezone
from html import escape
from typing import Iterable, Optional

from babel.dates import format_datetime

from sleeptracker.core.models import LocaleSettings, SleepNight, SleepQuality

HISTORY_TITLE = "Here is your sleep data"
NO_QUALITY = "--"
DATE_PATTERN = "EEEE MMM-dd-yyyy 'Time:' HH:mm"


def convert_numeric_quality_to_string(quality: Optional[int]) -> str:
    """Return the label of a quality rating, or ``"--"`` if unknown."""
    if quality is None:
        return NO_QUALITY
    try:
        return str(SleepQuality(quality))
    except ValueError:
        return NO_QUALITY


def convert_millis_to_date_string(
    time_milli: int, locale_settings: Optional[LocaleSettings] = None
) -> str:
    """Render an epoch-milliseconds timestamp in the configured locale and zone.

    Args:
        time_milli: Epoch milliseconds
        locale_settings: Locale and time zone; defaults to en_US / UTC

    Returns:
        Date string such as ``"Monday Jan-01-2024 Time: 22:30"``
    """
    settings = locale_settings or LocaleSettings()
    moment = datetime.fromtimestamp(time_milli / 1000, tz=timezone.utc)
    return format_datetime(
        moment, DATE_PATTERN, tzinfo=settings.timezone, locale=settings.locale
    )


def format_duration(duration_milli: int) -> str:
    """Render a duration as ``H:MM:SS``."""
    total_seconds = max(0, duration_milli) // 1000
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def format_night(night: SleepNight, locale_settings: Optional[LocaleSettings] = None) -> str:
    """Render one night as an HTML fragment.

    Open nights only show their start time.
    """
    parts = [f"<b>Start:</b>\t{convert_millis_to_date_string(night.start_time_milli, locale_settings)}<br>"]
    if not night.is_open:
        parts.append(
            f"<b>End:</b>\t{convert_millis_to_date_string(night.end_time_milli, locale_settings)}<br>"
        )
        parts.append(
            f"<b>Quality:</b>\t{convert_numeric_quality_to_string(night.sleep_quality)}<br>"
        )
        parts.append(f"<b>Hours:Minutes:Seconds:</b>\t{format_duration(night.duration_milli)}<br>")
    if night.notes:
        parts.append(f"<b>Notes:</b>\t{escape(night.notes)}<br>")
    return "".join(parts)


def format_nights(
    nights: Optional[Iterable[SleepNight]], locale_settings: Optional[LocaleSettings] = None
) -> str:
    """Render the whole history as an HTML document.

    Args:
        nights: Nights in display order (most recent first); None is treated as empty
        locale_settings: Locale and time zone for dates

    Returns:
        HTML string headed by the history title
    """
    body = "<br>".join(format_night(night, locale_settings) for night in nights or [])
    return f"<h3>{HISTORY_TITLE}</h3>{body}"
