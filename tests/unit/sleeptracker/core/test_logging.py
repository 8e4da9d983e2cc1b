"""Unit tests for logging module."""

import logging
import tempfile
from pathlib import Path

from sleeptracker.core.logging import MillisecondFormatter, setup_logging


class TestMillisecondFormatter:
    """Test MillisecondFormatter class."""

    def test_format_includes_milliseconds(self):
        """Test that timestamps carry a millisecond suffix."""
        formatter = MillisecondFormatter(fmt="%(asctime)s %(message)s")
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        record.msecs = 7

        message = formatter.format(record)

        timestamp = message.split(" Test message")[0]
        assert timestamp.endswith(".007")
        assert len(timestamp) == len("2024-01-01 00:00:00.000")


class TestSetupLogging:
    """Test setup_logging function."""

    def test_setup_logging_default(self):
        """Test logging setup with default parameters."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "test.log"
            setup_logging(log_file=log_file)

            assert log_file.exists()

            logger = logging.getLogger(__name__)
            logger.info("Test message")

            log_content = log_file.read_text()
            assert "Test message" in log_content
            assert "INFO" in log_content
            # YYYY-MM-DD HH:MM:SS.mmm [ThreadName] LEVEL filename.py:line - message
            assert "[MainThread" in log_content
            assert "test_logging.py:" in log_content
            assert " - Test message" in log_content

    def test_setup_logging_with_level(self):
        """Test logging setup with specific log level."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "test.log"
            setup_logging(log_level="DEBUG", log_file=log_file)

            logger = logging.getLogger(__name__)
            logger.debug("Debug message")

            log_content = log_file.read_text()
            assert "Debug message" in log_content
            assert "DEBUG" in log_content

    def test_console_respects_level(self, capsys):
        """Test that stdout only shows records at the requested level."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_level="WARNING", log_file=Path(tmpdir) / "test.log")

            logger = logging.getLogger(__name__)
            logger.info("quiet message")
            logger.warning("loud message")

            out = capsys.readouterr().out
            assert "quiet message" not in out
            assert "loud message" in out

    def test_sqlalchemy_logging_quieted(self):
        """Test that SQLAlchemy's own loggers stay at WARNING."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_level="DEBUG", log_file=Path(tmpdir) / "test.log")

            assert logging.getLogger("sqlalchemy").level == logging.WARNING

    def test_setup_logging_invalid_file(self):
        """Test logging setup handles invalid file path gracefully."""
        invalid_path = Path("/nonexistent/directory/test.log")

        setup_logging(log_file=invalid_path)

        logger = logging.getLogger(__name__)
        logger.info("Test message")
