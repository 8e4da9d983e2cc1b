"""Logging configuration for SleepTracker application.

This module provides the millisecond-precision formatter and the
application-wide logging setup used by the command-line entry point.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(threadName)-15s] %(levelname)-5s %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class MillisecondFormatter(logging.Formatter):
    """Custom formatter that includes milliseconds in timestamps.

    This formatter extends logging.Formatter to include milliseconds
    in the timestamp, even when a custom datefmt is specified.
    """

    def formatTime(self, record, datefmt=None):
        """Format the time with milliseconds.

        Args:
            record: LogRecord instance
            datefmt: Date format string (defaults to DATE_FORMAT)

        Returns:
            Formatted timestamp string with milliseconds
        """
        ct = self.converter(record.created)
        s = time.strftime(datefmt or DATE_FORMAT, ct)
        return f"{s}.{int(record.msecs):03d}"


def setup_logging(log_level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Configure application-wide logging.

    Sets up a file handler that records everything and a stdout handler at
    the requested level. Thread names are part of the format so work done on
    the database executor is easy to tell apart from the UI thread.

    Log format: YYYY-MM-DD HH:MM:SS.mmm [ThreadName     ] LEVEL  filename.py:line - message

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (default: sleeptracker.log in current directory)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = MillisecondFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []

    if log_file is None:
        log_file = Path("sleeptracker.log")

    try:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    except (OSError, PermissionError) as e:
        # Keep going with console logging only
        print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(numeric_level)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    for handler in handlers:
        root_logger.addHandler(handler)

    # SQLAlchemy is chatty at DEBUG
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized at level {log_level}")
    logger.info(f"Log file: {log_file.absolute()}")
