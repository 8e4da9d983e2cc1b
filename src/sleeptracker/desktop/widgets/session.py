"""Session control widget for starting and stopping sleep tracking.

This module provides the SessionControlWidget that displays Start, Stop,
and Clear buttons for the tracker screen.
"""

import logging
from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

logger = logging.getLogger(__name__)


class SessionControlWidget(QWidget):
    """Widget for tracker control buttons.

    The widget only forwards clicks; which buttons are enabled is decided by
    the view model and pushed in through the ``set_*_enabled`` methods.
    """

    # Signals
    start_requested = Signal()
    stop_requested = Signal()
    clear_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None):
        """Initialize the SessionControlWidget.

        Args:
            parent: Optional parent widget
        """
        super().__init__(parent)
        logger.debug("Initializing SessionControlWidget")

        self._start_button: Optional[QPushButton] = None
        self._stop_button: Optional[QPushButton] = None
        self._clear_button: Optional[QPushButton] = None

        self._setup_ui()

    def _setup_ui(self) -> None:
        """Setup the UI components."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(8)

        title_label = QLabel("Sleep Tracking")
        title_label.setStyleSheet("font-size: 14px; font-weight: bold;")
        main_layout.addWidget(title_label)

        button_layout = QHBoxLayout()
        button_layout.setSpacing(8)

        self._start_button = QPushButton("Start")
        self._start_button.setToolTip("Start tracking a night of sleep")
        self._start_button.clicked.connect(self._on_start_clicked)
        button_layout.addWidget(self._start_button)

        self._stop_button = QPushButton("Stop")
        self._stop_button.setToolTip("Stop tracking and rate the night")
        self._stop_button.clicked.connect(self._on_stop_clicked)
        button_layout.addWidget(self._stop_button)

        main_layout.addLayout(button_layout)

        self._clear_button = QPushButton("Clear")
        self._clear_button.setToolTip("Delete all recorded nights")
        self._clear_button.clicked.connect(self._on_clear_clicked)
        main_layout.addWidget(self._clear_button)

        logger.debug("SessionControlWidget UI setup complete")

    def _on_start_clicked(self) -> None:
        """Handle Start button click."""
        logger.info("Start button clicked")
        self.start_requested.emit()

    def _on_stop_clicked(self) -> None:
        """Handle Stop button click."""
        logger.info("Stop button clicked")
        self.stop_requested.emit()

    def _on_clear_clicked(self) -> None:
        """Handle Clear button click."""
        logger.info("Clear button clicked")
        self.clear_requested.emit()

    def set_start_enabled(self, enabled: bool) -> None:
        """Enable or disable the Start button."""
        self._start_button.setEnabled(bool(enabled))

    def set_stop_enabled(self, enabled: bool) -> None:
        """Enable or disable the Stop button."""
        self._stop_button.setEnabled(bool(enabled))

    def set_clear_enabled(self, enabled: bool) -> None:
        """Enable or disable the Clear button."""
        self._clear_button.setEnabled(bool(enabled))

    def button_states(self) -> dict[str, bool]:
        """Get the enabled state of each button, keyed by button name."""
        return {
            "start": self._start_button.isEnabled(),
            "stop": self._stop_button.isEnabled(),
            "clear": self._clear_button.isEnabled(),
        }
