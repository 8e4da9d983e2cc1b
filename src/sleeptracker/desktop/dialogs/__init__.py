"""
Dialogs for SleepTracker desktop application.

This module provides the About dialog and the sleep quality dialog.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from sleeptracker.desktop.dialogs.quality import SleepQualityDialog

logger = logging.getLogger(__name__)


class AboutDialog(QDialog):
    """About dialog displaying application name and version."""

    def __init__(self, app_name: str, app_version: str, parent: Optional[QWidget] = None):
        """Initialize the About dialog.

        Args:
            app_name: Application name
            app_version: Application version
            parent: Optional parent widget
        """
        super().__init__(parent)
        logger.debug("Initializing AboutDialog")

        self.setWindowTitle(f"About {app_name}")
        self.setModal(True)
        self.setMinimumWidth(360)

        layout = QVBoxLayout(self)
        layout.setSpacing(15)
        layout.setContentsMargins(30, 30, 30, 30)

        name_label = QLabel(f"<h1>{app_name}</h1>")
        name_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(name_label)

        version_label = QLabel(f"<p>Version {app_version}</p>")
        version_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        version_label.setStyleSheet("color: #666666;")
        layout.addWidget(version_label)

        description_label = QLabel(
            "<p>Track when you go to sleep and wake up, and rate how well you slept.</p>"
        )
        description_label.setWordWrap(True)
        description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(description_label)

        close_button = QPushButton("Close")
        close_button.setDefault(True)
        close_button.clicked.connect(self.accept)
        layout.addWidget(close_button, alignment=Qt.AlignmentFlag.AlignCenter)

        logger.debug("AboutDialog initialized successfully")


__all__ = ["AboutDialog", "SleepQualityDialog"]
