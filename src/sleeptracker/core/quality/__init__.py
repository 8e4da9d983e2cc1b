"""Sleep quality rating screen logic."""

from sleeptracker.core.quality.view_model import SleepQualityViewModel

__all__ = ["SleepQualityViewModel"]
