"""Core application logic: models, storage and view models."""

from sleeptracker.core.models import AppSettings, SleepNight, SleepQuality
from sleeptracker.core.quality import SleepQualityViewModel
from sleeptracker.core.tracker import SleepTrackerViewModel

__all__ = [
    "AppSettings",
    "SleepNight",
    "SleepQuality",
    "SleepQualityViewModel",
    "SleepTrackerViewModel",
]
