"""Settings manager for SleepTracker application.

This module provides the SettingsManager class for persisting and loading
application settings as JSON in the platform config directory.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from sleeptracker.core.models import AppSettings, LocaleSettings, WindowGeometry

logger = logging.getLogger(__name__)

DATABASE_FILENAME = "sleep_history.db"


class SettingsManager:
    """Manages application settings.

    Provides methods for:
    - Loading and saving settings to JSON files
    - Resolving the sleep database location
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize settings manager.

        Args:
            config_dir: Optional custom config directory. If None, uses platform default.
        """
        if config_dir is None:
            config_dir = self._get_default_config_dir()

        self.config_dir = config_dir
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.settings_file = self.config_dir / "settings.json"

        logger.info(f"Settings manager initialized with config dir: {self.config_dir}")

    def _get_default_config_dir(self) -> Path:
        """Get platform-specific default config directory.

        Returns:
            Path to config directory
        """
        if sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support" / "SleepTracker"
        elif sys.platform == "win32":
            base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
            return base / "SleepTracker"
        else:
            base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
            return base / "sleeptracker"

    def database_path(self, settings: AppSettings) -> Path:
        """Get the database file configured in ``settings`` or the default one."""
        return settings.database_path or self.config_dir / DATABASE_FILENAME

    def load_settings(self) -> AppSettings:
        """Load settings from storage.

        Returns:
            AppSettings instance with loaded settings, or default settings if file doesn't exist

        Raises:
            ValueError: If settings file is corrupted or invalid
        """
        if not self.settings_file.exists():
            logger.info("Settings file not found, using default settings")
            return AppSettings()

        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                data = json.load(f)

            logger.info("Settings loaded successfully")
            return self._deserialize_settings(data)

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse settings file: {e}")
            raise ValueError(f"Settings file is corrupted: {e}") from e
        except Exception as e:
            logger.error(f"Failed to load settings: {e}")
            raise ValueError(f"Failed to load settings: {e}") from e

    def save_settings(self, settings: AppSettings) -> None:
        """Save settings to storage.

        Args:
            settings: AppSettings instance to save

        Raises:
            IOError: If settings file cannot be written
        """
        try:
            data = self._serialize_settings(settings)

            # Write to temporary file first, then rename (atomic operation)
            temp_file = self.settings_file.with_suffix(".tmp")
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)

            temp_file.replace(self.settings_file)

            logger.info("Settings saved successfully")

        except Exception as e:
            logger.error(f"Failed to save settings: {e}")
            raise IOError(f"Failed to save settings: {e}") from e

    def _serialize_settings(self, settings: AppSettings) -> Dict[str, Any]:
        """Serialize AppSettings to JSON-compatible dictionary."""
        return {
            "database_path": str(settings.database_path) if settings.database_path else None,
            "locale_settings": {
                "locale": settings.locale_settings.locale_string,
                "timezone": settings.locale_settings.timezone_name,
            },
            "log_level": settings.log_level,
            "window_geometry": (
                {
                    "x": settings.window_geometry.x,
                    "y": settings.window_geometry.y,
                    "width": settings.window_geometry.width,
                    "height": settings.window_geometry.height,
                }
                if settings.window_geometry
                else None
            ),
        }

    def _deserialize_settings(self, data: Dict[str, Any]) -> AppSettings:
        """Deserialize JSON dictionary to AppSettings."""
        locale_data = data.get("locale_settings", {})
        locale_settings = LocaleSettings.from_strings(
            language=locale_data.get("locale", "en_US"),
            timezone_name=locale_data.get("timezone", "UTC"),
        )

        window_geometry = None
        if data.get("window_geometry"):
            wg_data = data["window_geometry"]
            window_geometry = WindowGeometry(
                x=wg_data["x"],
                y=wg_data["y"],
                width=wg_data["width"],
                height=wg_data["height"],
            )

        database_path = data.get("database_path")

        return AppSettings(
            database_path=Path(database_path) if database_path else None,
            locale_settings=locale_settings,
            log_level=data.get("log_level", "INFO"),
            window_geometry=window_geometry,
        )
