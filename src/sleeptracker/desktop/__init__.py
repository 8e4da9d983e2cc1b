"""
Desktop UI module for SleepTracker.

This module provides the PySide6-based desktop user interface.
"""

from sleeptracker.desktop.main import MainWindow

__all__ = ["MainWindow"]
