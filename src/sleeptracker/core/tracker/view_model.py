"""View model for the sleep tracker screen.

This module provides the SleepTrackerViewModel that starts and stops sleep
nights, clears the history and publishes the state the tracker screen
renders: button visibility, the formatted history, and one-shot events for
navigating to the quality screen and for the "data cleared" notification.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor
from dataclasses import replace
from typing import Callable, List, Optional

from PySide6.QtCore import QObject

from sleeptracker.core.database import SleepDatabaseDao
from sleeptracker.core.formatting import format_nights
from sleeptracker.core.models import LocaleSettings, SleepNight, current_time_millis
from sleeptracker.core.observable import ObservableValue, OneShotEvent, map_observable
from sleeptracker.core.view_model import ViewModel

logger = logging.getLogger(__name__)


def resolve_tonight(night: Optional[SleepNight]) -> Optional[SleepNight]:
    """Return ``night`` if it is still open, otherwise None.

    A most-recent night that has already been stopped means nothing is being
    tracked right now.
    """
    if night is None or not night.is_open:
        return None
    return night


class SleepTrackerViewModel(ViewModel):
    """Coordinates the tracker screen with the sleep database.

    State Machine (per night):
        Absent -> Open (start_session)
        Open -> Closed (stop_session)
        any -> Absent (clear_history)

    Each command returns the asyncio task doing the work; the UI ignores it,
    tests await it. Commands issued back-to-back are not serialized.

    Observables:
        tonight: Open night or None
        nights: All nights, most recent first
        nights_string: ``nights`` rendered as HTML
        start_button_visible / stop_button_visible / clear_button_visible

    Events:
        navigate_to_sleep_quality: Carries the night that was just stopped
        show_snackbar_event: True once after the history was cleared
    """

    def __init__(
        self,
        database: SleepDatabaseDao,
        locale_settings: Optional[LocaleSettings] = None,
        executor: Optional[Executor] = None,
        clock: Callable[[], int] = current_time_millis,
        parent: Optional[QObject] = None,
    ):
        """Initialize the view model and start loading tonight.

        Args:
            database: Sleep database DAO
            locale_settings: Locale used to render the history
            executor: Executor for database calls (private pool if None)
            clock: Returns the current time in epoch milliseconds
            parent: Optional parent QObject
        """
        super().__init__(executor=executor, parent=parent)
        self._database = database
        self._locale_settings = locale_settings or LocaleSettings()
        self._clock = clock

        self.tonight = ObservableValue("tonight", parent=self)
        self.nights = ObservableValue("nights", [], parent=self)

        self.nights_string = map_observable(
            self.nights, lambda nights: format_nights(nights, self._locale_settings), "nights_string"
        )
        self.start_button_visible = map_observable(
            self.tonight, lambda night: night is None, "start_button_visible"
        )
        self.stop_button_visible = map_observable(
            self.tonight, lambda night: night is not None, "stop_button_visible"
        )
        self.clear_button_visible = map_observable(
            self.nights, lambda nights: bool(nights), "clear_button_visible"
        )

        self.navigate_to_sleep_quality = OneShotEvent("navigate_to_sleep_quality", parent=self)
        self.show_snackbar_event = OneShotEvent("show_snackbar_event", default=False, parent=self)

        self.initialization = self.launch(self._initialize(), "initialize-tonight")
        logger.info("SleepTrackerViewModel initialized")

    # ========================================================================
    # Loading
    # ========================================================================

    async def _initialize(self) -> None:
        await self.run_io(self._database.observe_all_nights, self._on_nights_changed)
        self.tonight.set_value(await self.get_tonight_from_database())

    async def get_tonight_from_database(self) -> Optional[SleepNight]:
        """Load the night currently being tracked.

        Returns:
            The most recent night if it is still open, otherwise None
        """
        night = await self.run_io(self._database.get_tonight)
        return resolve_tonight(night)

    def _on_nights_changed(self, nights: List[SleepNight]) -> None:
        # Called by the DAO, usually on an executor thread
        if not self.is_closed:
            self.post(self._publish_nights, nights)

    def _publish_nights(self, nights: List[SleepNight]) -> None:
        if not self.is_closed:
            self.nights.set_value(nights)

    # ========================================================================
    # Commands
    # ========================================================================

    def start_session(self) -> asyncio.Task:
        """Start tracking a new night."""
        logger.info("Start tracking requested")
        return self.launch(self._start_session(), "start-session")

    async def _start_session(self) -> None:
        new_night = SleepNight.started_at(self._clock())
        key = await self.run_io(self._database.insert, new_night)
        logger.debug(f"Started night {key}")
        self.tonight.set_value(await self.get_tonight_from_database())

    def stop_session(self) -> asyncio.Task:
        """Stop the night being tracked and request the quality screen.

        Does nothing if no night is open.
        """
        logger.info("Stop tracking requested")
        return self.launch(self._stop_session(), "stop-session")

    async def _stop_session(self) -> None:
        old_night = self.tonight.value
        if old_night is None:
            logger.debug("No open night, ignoring stop")
            return

        # End must differ from start or the night would still read as open
        end_time = max(self._clock(), old_night.start_time_milli + 1)
        closed_night = replace(old_night, end_time_milli=end_time)

        await self.run_io(self._database.update, closed_night)
        logger.debug(f"Stopped night {closed_night.night_id}")

        self.tonight.set_value(None)
        self.navigate_to_sleep_quality.fire(closed_night)

    def clear_history(self) -> asyncio.Task:
        """Delete every night and request the "data cleared" notification."""
        logger.info("Clear history requested")
        return self.launch(self._clear_history(), "clear-history")

    async def _clear_history(self) -> None:
        await self.run_io(self._database.clear)
        self.tonight.set_value(None)
        self.show_snackbar_event.fire(True)

    # ========================================================================
    # Event acknowledgment
    # ========================================================================

    def acknowledge_navigation(self) -> None:
        """Reset the navigation event once the quality screen was shown."""
        self.navigate_to_sleep_quality.acknowledge()

    def acknowledge_notification(self) -> None:
        """Reset the notification event once the message was shown."""
        self.show_snackbar_event.acknowledge()

    def _on_close(self) -> None:
        self._database.remove_observer(self._on_nights_changed)
