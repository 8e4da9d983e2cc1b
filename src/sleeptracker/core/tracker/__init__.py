"""Sleep tracker screen logic.

This module provides the view model that starts and stops sleep nights
and publishes the tracker screen's observable state.
"""

from sleeptracker.core.tracker.view_model import SleepTrackerViewModel, resolve_tonight

__all__ = ["SleepTrackerViewModel", "resolve_tonight"]
