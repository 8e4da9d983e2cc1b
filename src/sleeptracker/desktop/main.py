"""
Main window for SleepTracker desktop application.

This module provides the main application window hosting the tracker
screen, and routes the tracker's one-shot events to the quality dialog and
the status bar.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QWidget

from sleeptracker.core.database import SleepDatabaseDao
from sleeptracker.core.models import AppSettings, SleepNight, WindowGeometry
from sleeptracker.core.quality import SleepQualityViewModel
from sleeptracker.core.settings import SettingsManager
from sleeptracker.core.tracker import SleepTrackerViewModel
from sleeptracker.core.version import get_version
from sleeptracker.core.view_model import IO_THREAD_PREFIX
from sleeptracker.desktop.dialogs import AboutDialog, SleepQualityDialog
from sleeptracker.desktop.widgets import SleepTrackerWidget

logger = logging.getLogger(__name__)

APP_NAME = "SleepTracker"
CLEARED_MESSAGE = "All your data is gone forever."
MESSAGE_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """Main application window for SleepTracker.

    Provides:
    - Tracker screen (buttons and history) as the central widget
    - Quality dialog opened when a night is stopped
    - Status bar showing the "data cleared" notification
    - Menu bar with File and Help menus

    Must be created while the asyncio event loop is running.
    """

    def __init__(
        self,
        database: SleepDatabaseDao,
        settings: Optional[AppSettings] = None,
        settings_manager: Optional[SettingsManager] = None,
        parent: Optional[QWidget] = None,
    ):
        """Initialize the main window.

        Args:
            database: Sleep database DAO shared by the screens
            settings: Application settings (defaults if None)
            settings_manager: Used to save window geometry on close; nothing
                is saved when None
            parent: Optional parent widget
        """
        super().__init__(parent)
        logger.info("Initializing MainWindow")

        self._app_name = APP_NAME
        self._app_version = get_version()
        self._database = database
        self._settings = settings or AppSettings()
        self._settings_manager = settings_manager

        self.setWindowTitle(f"{self._app_name} v{self._app_version}")
        self.setMinimumSize(480, 600)

        # One executor for every screen's database calls
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix=IO_THREAD_PREFIX)

        self._tracker_view_model = SleepTrackerViewModel(
            database=self._database,
            locale_settings=self._settings.locale_settings,
            executor=self._executor,
            parent=self,
        )
        self._tracker_widget: Optional[SleepTrackerWidget] = None

        self._quality_dialog: Optional[SleepQualityDialog] = None
        self._quality_view_model: Optional[SleepQualityViewModel] = None

        self._setup_menu_bar()
        self._setup_central_widget()
        self._setup_status_bar()
        self._connect_signals()
        self._apply_settings()

        logger.info("MainWindow initialized successfully")

    @property
    def tracker_view_model(self) -> SleepTrackerViewModel:
        """Get the tracker screen's view model."""
        return self._tracker_view_model

    @property
    def tracker_widget(self) -> SleepTrackerWidget:
        """Get the tracker screen widget."""
        return self._tracker_widget

    @property
    def quality_dialog(self) -> Optional[SleepQualityDialog]:
        """Get the open quality dialog, if any."""
        return self._quality_dialog

    @property
    def quality_view_model(self) -> Optional[SleepQualityViewModel]:
        """Get the view model of the open quality dialog, if any."""
        return self._quality_view_model

    def _apply_settings(self) -> None:
        """Apply loaded settings to the window."""
        if self._settings.window_geometry:
            geom = self._settings.window_geometry
            self.setGeometry(geom.x, geom.y, geom.width, geom.height)
            logger.debug(
                f"Applied window geometry: {geom.x}, {geom.y}, {geom.width}x{geom.height}"
            )

    def _save_settings(self) -> None:
        """Save window geometry to storage."""
        if self._settings_manager is None:
            return

        try:
            geom = self.geometry()
            self._settings.window_geometry = WindowGeometry(
                x=geom.x(),
                y=geom.y(),
                width=geom.width(),
                height=geom.height(),
            )
            self._settings_manager.save_settings(self._settings)
        except IOError as e:
            logger.error(f"Error saving settings: {e}", exc_info=True)

    def _setup_menu_bar(self) -> None:
        """Setup the menu bar with all menus."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.setStatusTip("Exit application")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = menu_bar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.setStatusTip(f"About {self._app_name}")
        about_action.triggered.connect(self._show_about_dialog)
        help_menu.addAction(about_action)

        logger.debug("Menu bar setup complete")

    def _setup_central_widget(self) -> None:
        """Setup the tracker screen as the central widget."""
        self._tracker_widget = SleepTrackerWidget(self._tracker_view_model, self)
        self.setCentralWidget(self._tracker_widget)

    def _setup_status_bar(self) -> None:
        """Setup the status bar."""
        self.statusBar().showMessage("Ready")
        logger.debug("Status bar setup complete")

    def _connect_signals(self) -> None:
        """Connect view model events to handlers."""
        vm = self._tracker_view_model
        vm.navigate_to_sleep_quality.observe(self._on_navigate_to_sleep_quality)
        vm.show_snackbar_event.observe(self._on_show_snackbar)

    def _show_about_dialog(self) -> None:
        """Show the About dialog."""
        logger.debug("Showing About dialog")
        dialog = AboutDialog(self._app_name, self._app_version, self)
        dialog.exec()

    # ========================================================================
    # Tracker events
    # ========================================================================

    def _on_navigate_to_sleep_quality(self, _night: SleepNight) -> None:
        """Open the quality dialog for the night that was just stopped."""
        night = self._tracker_view_model.navigate_to_sleep_quality.consume()
        if night is None:
            return

        self._tracker_view_model.acknowledge_navigation()
        self._show_quality_dialog(night)

    def _on_show_snackbar(self, _show: bool) -> None:
        """Show the "data cleared" message in the status bar."""
        if not self._tracker_view_model.show_snackbar_event.consume():
            return

        self.statusBar().showMessage(CLEARED_MESSAGE, MESSAGE_TIMEOUT_MS)
        self._tracker_view_model.acknowledge_notification()

    # ========================================================================
    # Quality dialog
    # ========================================================================

    def _show_quality_dialog(self, night: SleepNight) -> None:
        """Create the quality view model and dialog for ``night``."""
        self._close_quality_dialog()
        logger.info(f"Navigating to sleep quality for night {night.night_id}")

        view_model = SleepQualityViewModel(
            night_key=night.night_id,
            database=self._database,
            executor=self._executor,
            parent=self,
        )
        dialog = SleepQualityDialog(night, self._settings.locale_settings, self)

        dialog.quality_selected.connect(view_model.set_sleep_quality)
        view_model.navigate_to_sleep_tracker.observe(self._on_navigate_to_sleep_tracker)
        dialog.rejected.connect(self._close_quality_dialog)

        self._quality_view_model = view_model
        self._quality_dialog = dialog
        dialog.open()

    def _on_navigate_to_sleep_tracker(self, _done: bool) -> None:
        """Return to the tracker once the rating was saved."""
        if self._quality_view_model is None:
            return
        if not self._quality_view_model.navigate_to_sleep_tracker.consume():
            return

        self._quality_view_model.acknowledge_navigation()
        self.statusBar().showMessage("Sleep quality saved", MESSAGE_TIMEOUT_MS)
        self._close_quality_dialog()

    def _close_quality_dialog(self) -> None:
        """Close the quality dialog and end its view model's scope."""
        view_model, self._quality_view_model = self._quality_view_model, None
        dialog, self._quality_dialog = self._quality_dialog, None

        if view_model is not None:
            view_model.close()
        if dialog is not None:
            dialog.rejected.disconnect(self._close_quality_dialog)
            dialog.close()
            dialog.deleteLater()

    def closeEvent(self, event) -> None:
        """Handle window close event.

        Save settings, end the view models' scopes and release the executor.
        """
        logger.info("Closing main window")

        self._save_settings()
        self._close_quality_dialog()
        self._tracker_view_model.close()
        self._executor.shutdown(wait=False, cancel_futures=True)

        event.accept()
        logger.info("Main window closed")
