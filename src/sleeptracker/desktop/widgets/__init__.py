"""
Desktop UI widgets for SleepTracker application.

This package provides the tracker screen and its control buttons.
"""

from sleeptracker.desktop.widgets.session import SessionControlWidget
from sleeptracker.desktop.widgets.tracker import SleepTrackerWidget

__all__ = ["SessionControlWidget", "SleepTrackerWidget"]
