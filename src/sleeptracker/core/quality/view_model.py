"""View model for the sleep quality screen."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor
from dataclasses import replace
from typing import Optional

from PySide6.QtCore import QObject

from sleeptracker.core.database import SleepDatabaseDao
from sleeptracker.core.models import SleepQuality
from sleeptracker.core.observable import OneShotEvent
from sleeptracker.core.view_model import ViewModel

logger = logging.getLogger(__name__)


class SleepQualityViewModel(ViewModel):
    """Records the quality rating of a finished night.

    Events:
        navigate_to_sleep_tracker: True once the rating was saved
    """

    def __init__(
        self,
        night_key: int,
        database: SleepDatabaseDao,
        executor: Optional[Executor] = None,
        parent: Optional[QObject] = None,
    ):
        """Initialize the view model.

        Args:
            night_key: Key of the night being rated
            database: Sleep database DAO
            executor: Executor for database calls (private pool if None)
            parent: Optional parent QObject
        """
        super().__init__(executor=executor, parent=parent)
        self._night_key = night_key
        self._database = database
        self.navigate_to_sleep_tracker = OneShotEvent(
            "navigate_to_sleep_tracker", default=False, parent=self
        )

    @property
    def night_key(self) -> int:
        """Get the key of the night being rated."""
        return self._night_key

    def set_sleep_quality(
        self, quality: SleepQuality, notes: Optional[str] = None
    ) -> asyncio.Task:
        """Save the rating and request navigation back to the tracker.

        Args:
            quality: Rating (a SleepQuality or its integer value)
            notes: Optional notes; existing notes are kept when None

        Returns:
            The task doing the work

        Raises:
            ValueError: If ``quality`` is not a valid rating
        """
        quality = SleepQuality(quality)
        logger.info(f"Rating night {self._night_key}: {quality}")
        return self.launch(self._set_sleep_quality(quality, notes), "set-sleep-quality")

    async def _set_sleep_quality(self, quality: SleepQuality, notes: Optional[str]) -> None:
        night = await self.run_io(self._database.get, self._night_key)
        if night is None:
            logger.warning(f"Night {self._night_key} no longer exists, rating dropped")
        else:
            rated = replace(
                night,
                sleep_quality=quality,
                notes=notes if notes is not None else night.notes,
            )
            await self.run_io(self._database.update, rated)

        self.navigate_to_sleep_tracker.fire(True)

    def acknowledge_navigation(self) -> None:
        """Reset the navigation event once the tracker screen is shown again."""
        self.navigate_to_sleep_tracker.acknowledge()
