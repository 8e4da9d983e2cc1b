"""
Sleep quality dialog shown after a night is stopped.

This module provides a dialog with one button per quality rating and an
optional notes field.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QDialog,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from sleeptracker.core.formatting import convert_millis_to_date_string, format_duration
from sleeptracker.core.models import LocaleSettings, SleepNight, SleepQuality

logger = logging.getLogger(__name__)


class SleepQualityDialog(QDialog):
    """Dialog asking how well the user slept.

    Signals:
        quality_selected: Emitted with (quality value, notes) when a rating is clicked
    """

    quality_selected = Signal(int, str)

    def __init__(
        self,
        night: SleepNight,
        locale_settings: Optional[LocaleSettings] = None,
        parent: Optional[QWidget] = None,
    ):
        """Initialize the SleepQualityDialog.

        Args:
            night: The night that was just stopped
            locale_settings: Locale used to render the night's dates
            parent: Optional parent widget
        """
        super().__init__(parent)
        logger.debug(f"Initializing SleepQualityDialog for night {night.night_id}")

        self._night = night
        self._locale_settings = locale_settings
        self._quality_buttons: dict[SleepQuality, QPushButton] = {}
        self._notes_edit: Optional[QLineEdit] = None

        self.setWindowTitle("How was your sleep?")
        self.setMinimumWidth(360)

        self._setup_ui()

    @property
    def night(self) -> SleepNight:
        """Get the night being rated."""
        return self._night

    def _setup_ui(self) -> None:
        """Setup the UI components."""
        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        start = convert_millis_to_date_string(self._night.start_time_milli, self._locale_settings)
        summary = QLabel(
            f"<p>Started {start}<br>"
            f"Slept {format_duration(self._night.duration_milli)}</p>"
        )
        summary.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(summary)

        grid = QGridLayout()
        grid.setSpacing(8)
        for index, quality in enumerate(SleepQuality):
            button = QPushButton(str(quality))
            button.setToolTip(f"Rate this night as '{quality}'")
            button.clicked.connect(lambda _checked=False, q=quality: self._on_quality_clicked(q))
            grid.addWidget(button, index // 3, index % 3)
            self._quality_buttons[quality] = button
        layout.addLayout(grid)

        self._notes_edit = QLineEdit()
        self._notes_edit.setPlaceholderText("Notes (optional)")
        if self._night.notes:
            self._notes_edit.setText(self._night.notes)
        layout.addWidget(self._notes_edit)

        logger.debug("SleepQualityDialog UI setup complete")

    def quality_button(self, quality: SleepQuality) -> QPushButton:
        """Get the button for a rating."""
        return self._quality_buttons[quality]

    def set_buttons_enabled(self, enabled: bool) -> None:
        """Enable or disable all rating buttons."""
        for button in self._quality_buttons.values():
            button.setEnabled(enabled)

    def _on_quality_clicked(self, quality: SleepQuality) -> None:
        """Handle a rating button click."""
        logger.info(f"Quality selected: {quality}")
        # Block double submissions while the rating is saved
        self.set_buttons_enabled(False)
        self.quality_selected.emit(int(quality), self._notes_edit.text().strip())
