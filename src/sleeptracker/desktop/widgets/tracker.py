"""Tracker screen widget.

This module provides the SleepTrackerWidget which binds a
SleepTrackerViewModel to the control buttons and the history view.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QTextBrowser, QVBoxLayout, QWidget

from sleeptracker.core.tracker import SleepTrackerViewModel
from sleeptracker.desktop.widgets.session import SessionControlWidget

logger = logging.getLogger(__name__)


class SleepTrackerWidget(QWidget):
    """Control buttons on top, formatted sleep history below.

    One-shot events are not handled here; the main window owns navigation
    and notifications.
    """

    def __init__(self, view_model: SleepTrackerViewModel, parent: Optional[QWidget] = None):
        """Initialize the SleepTrackerWidget.

        Args:
            view_model: View model to render and send commands to
            parent: Optional parent widget
        """
        super().__init__(parent)
        logger.debug("Initializing SleepTrackerWidget")

        self._view_model = view_model
        self._session_control: Optional[SessionControlWidget] = None
        self._history_view: Optional[QTextBrowser] = None

        self._setup_ui()
        self._bind_view_model()

    @property
    def session_control(self) -> SessionControlWidget:
        """Get the control button widget."""
        return self._session_control

    @property
    def history_view(self) -> QTextBrowser:
        """Get the history text view."""
        return self._history_view

    def _setup_ui(self) -> None:
        """Setup the UI components."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self._session_control = SessionControlWidget(self)
        layout.addWidget(self._session_control)

        self._history_view = QTextBrowser(self)
        self._history_view.setReadOnly(True)
        self._history_view.setOpenLinks(False)
        layout.addWidget(self._history_view, stretch=1)

    def _bind_view_model(self) -> None:
        """Render view model state and forward button clicks to it."""
        vm = self._view_model

        vm.start_button_visible.observe(self._session_control.set_start_enabled)
        vm.stop_button_visible.observe(self._session_control.set_stop_enabled)
        vm.clear_button_visible.observe(self._session_control.set_clear_enabled)
        vm.nights_string.observe(self._history_view.setHtml)

        self._session_control.start_requested.connect(vm.start_session)
        self._session_control.stop_requested.connect(vm.stop_session)
        self._session_control.clear_requested.connect(vm.clear_history)

        logger.debug("SleepTrackerWidget bound to view model")
