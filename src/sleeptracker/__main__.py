"""
SleepTracker CLI entry point.

This module provides the command-line interface for the SleepTracker application.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from babel import UnknownLocaleError

from sleeptracker.core.logging import setup_logging
from sleeptracker.core.models import AppSettings, LocaleSettings
from sleeptracker.core.version import get_version

APP_NAME = "SleepTracker"
APP_VERSION = get_version()
APP_DESCRIPTION = "Track your sleep and rate how well you slept"


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="sleeptracker",
        description=f"{APP_NAME} - {APP_DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Launch with the default database
  python -m sleeptracker

  # Use a specific database file
  python -m sleeptracker --database ~/nights.db

  # Render dates in Japanese, Tokyo time
  python -m sleeptracker --locale ja_JP --timezone Asia/Tokyo

  # Launch with debug logging
  python -m sleeptracker --log-level DEBUG
        """,
    )

    parser.add_argument(
        "--database",
        type=str,
        metavar="PATH",
        help="Path to the SQLite sleep database (default: in the config directory)",
    )

    parser.add_argument(
        "--config-dir",
        type=str,
        metavar="PATH",
        help="Directory holding settings.json (default: platform config directory)",
    )

    parser.add_argument(
        "--locale", type=str, metavar="LOCALE", help="Locale for dates, e.g. 'en_US' or 'ja'"
    )

    parser.add_argument(
        "--timezone", type=str, metavar="ZONE", help="IANA time zone for dates, e.g. 'Europe/Paris'"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        metavar="LEVEL",
        help="Logging level (default: from settings, INFO)",
    )

    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")

    return parser


def apply_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    """Apply command-line overrides to loaded settings.

    Args:
        settings: Settings loaded from disk
        args: Parsed command-line arguments

    Returns:
        The same settings instance, updated

    Raises:
        ValueError: If the locale or time zone is unknown
    """
    if args.database:
        settings.database_path = Path(args.database).expanduser()

    if args.locale or args.timezone:
        try:
            settings.locale_settings = LocaleSettings.from_strings(
                language=args.locale or settings.locale_settings.locale_string,
                timezone_name=args.timezone or settings.locale_settings.timezone_name,
            )
        except (UnknownLocaleError, ValueError, KeyError) as e:
            raise ValueError(f"Invalid locale or time zone: {e}") from e

    if args.log_level:
        settings.log_level = args.log_level

    return settings


def main() -> int:
    """Main entry point for the SleepTracker application.

    Returns:
        Exit code using os.EX_* constants:
        - os.EX_OK (0): Success
        - os.EX_USAGE (64): Invalid locale or time zone
        - os.EX_CONFIG (78): Settings file cannot be read
        - os.EX_SOFTWARE (70): Internal software error
    """
    parser = create_argument_parser()
    args = parser.parse_args()

    setup_logging(log_level=args.log_level or "INFO")
    logger = logging.getLogger(__name__)

    logger.info("Starting SleepTracker application")
    logger.debug(f"Command-line arguments: {args}")

    # Deferred so importing this module stays light
    from sleeptracker.core.database import SqlSleepDatabaseDao, get_engine, sqlite_url
    from sleeptracker.core.settings import SettingsManager

    try:
        config_dir: Optional[Path] = Path(args.config_dir).expanduser() if args.config_dir else None
        settings_manager = SettingsManager(config_dir=config_dir)

        try:
            settings = settings_manager.load_settings()
        except ValueError as e:
            logger.error(str(e))
            return os.EX_CONFIG

        try:
            settings = apply_overrides(settings, args)
        except ValueError as e:
            logger.error(str(e))
            return os.EX_USAGE

        if not args.log_level and settings.log_level != "INFO":
            setup_logging(log_level=settings.log_level)

        database_path = settings_manager.database_path(settings)
        logger.info(f"Using sleep database: {database_path}")
        database = SqlSleepDatabaseDao(get_engine(sqlite_url(database_path)))

        from PySide6 import QtAsyncio
        from PySide6.QtWidgets import QApplication

        app = QApplication(sys.argv)
        app.setApplicationName(APP_NAME)
        app.setOrganizationName(APP_NAME)
        app.setApplicationVersion(APP_VERSION)

        from sleeptracker.desktop.styles import get_global_stylesheet

        app.setStyleSheet(get_global_stylesheet())

        from sleeptracker.desktop import MainWindow

        windows: list[MainWindow] = []

        async def launch() -> None:
            # The window's view models need the running loop
            window = MainWindow(
                database=database, settings=settings, settings_manager=settings_manager
            )
            window.show()
            windows.append(window)
            logger.info("Desktop UI launched successfully")

        QtAsyncio.run(launch(), keep_running=True, quit_qapp=True)
        return os.EX_OK

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        return os.EX_OK

    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return os.EX_SOFTWARE


if __name__ == "__main__":
    sys.exit(main())
