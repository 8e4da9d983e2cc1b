"""
Global stylesheet definitions for SleepTracker desktop application.

This module provides centralized style definitions that are applied
application-wide, ensuring a consistent flat design across all components.
"""

# Global application stylesheet
# This is applied to QApplication and affects all widgets
GLOBAL_STYLESHEET = """
/* Flat design baseline for all components */

QLabel {
    background-color: transparent;
    border: none;
}

QPushButton {
    border: 1px solid palette(mid);
    border-radius: 3px;
    padding: 6px 12px;
    background-color: palette(button);
}

QPushButton:hover {
    background-color: palette(light);
    border: 1px solid palette(dark);
}

QPushButton:pressed {
    background-color: palette(mid);
}

QPushButton:disabled {
    color: palette(mid);
    border: 1px solid palette(midlight);
}

QTextBrowser, QLineEdit {
    border: 1px solid palette(mid);
    border-radius: 3px;
    padding: 5px;
    background-color: palette(base);
}

QLineEdit:focus {
    border: 1px solid palette(highlight);
}
"""


def get_global_stylesheet() -> str:
    """Get the global application stylesheet.

    Returns:
        Global stylesheet string
    """
    return GLOBAL_STYLESHEET
