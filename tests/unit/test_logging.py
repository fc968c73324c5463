"""Unit tests for LMS logging configuration."""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from lms.logging import setup_logging, truncate_output


@pytest.fixture(autouse=True)
def reset_lms_logger():
    """Detach file handlers so temporary directories can be removed."""
    yield
    logger = logging.getLogger("lms")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self) -> None:
        """Log directory is created if it doesn't exist."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir) / "nested" / "logs"
            setup_logging(log_dir=log_dir, console=False)

            assert log_dir.exists()

    def test_writes_to_log_file(self) -> None:
        """Log messages are written to lms.log."""
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=False)
            logger.info("test message 123")

            content = (Path(tmpdir) / "lms.log").read_text()
            assert "test message 123" in content

    def test_log_format(self) -> None:
        """Entries carry level and logger name."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=False)
            logging.getLogger("lms.repository.store").info("format test")

            content = (Path(tmpdir) / "lms.log").read_text()
            # Format: 2026-01-28 16:30:45 | INFO     | lms.repository.store | message
            assert " | INFO" in content
            assert " | lms.repository.store | format test" in content

    def test_component_loggers_share_file(self) -> None:
        """Repository, enrollment and API loggers write to the same file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=False)

            logging.getLogger("lms.repository.store").info("store log")
            logging.getLogger("lms.enrollment.service").info("enrollment log")
            logging.getLogger("lms.api.app").info("api log")

            content = (Path(tmpdir) / "lms.log").read_text()
            assert "store log" in content
            assert "enrollment log" in content
            assert "api log" in content

    def test_log_level_configurable(self) -> None:
        """Log level filters messages appropriately."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, level="WARNING", console=False)
            logger = logging.getLogger("lms")
            logger.info("should not appear")
            logger.warning("should appear")

            content = (Path(tmpdir) / "lms.log").read_text()
            assert "should not appear" not in content
            assert "should appear" in content

    @patch.dict(os.environ, {"LMS_LOG_LEVEL": "DEBUG"})
    def test_log_level_from_env(self) -> None:
        """Log level can be set via environment variable."""
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=False)

            assert logger.level == logging.DEBUG

    def test_log_dir_from_env(self) -> None:
        """Log directory can be set via environment variable."""
        with (
            tempfile.TemporaryDirectory() as tmpdir,
            patch.dict(os.environ, {"LMS_LOG_DIR": tmpdir}),
        ):
            setup_logging(console=False)

            assert (Path(tmpdir) / "lms.log").exists()

    def test_returns_lms_logger(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=False)

            assert logger.name == "lms"

    def test_no_duplicate_handlers_on_repeated_setup(self) -> None:
        """Repeated setup_logging calls don't add duplicate handlers."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=False)
            setup_logging(log_dir=tmpdir, console=False)

            assert len(logging.getLogger("lms").handlers) == 1

    def test_console_handler_added(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=True)

            assert len(logger.handlers) == 2

    def test_rotation_configured(self) -> None:
        """RotatingFileHandler is configured with correct max size."""
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, max_bytes=1024, backup_count=3, console=False)

            file_handler = next(h for h in logger.handlers if hasattr(h, "maxBytes"))
            assert file_handler.maxBytes == 1024
            assert file_handler.backupCount == 3


@pytest.mark.unit
class TestTruncateOutput:
    """Tests for truncate_output function."""

    def test_short_output_unchanged(self) -> None:
        assert truncate_output("short text", max_length=100) == "short text"

    def test_long_output_truncated(self) -> None:
        """Long output is truncated with indicator."""
        result = truncate_output("x" * 200, max_length=100)

        assert len(result) < 200
        assert "truncated" in result
        assert "100 more chars" in result
