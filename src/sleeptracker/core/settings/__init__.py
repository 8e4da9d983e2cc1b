"""Settings persistence."""

from sleeptracker.core.settings.manager import SettingsManager

__all__ = ["SettingsManager"]
