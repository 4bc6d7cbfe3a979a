"""Unit tests for roster logging configuration."""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from roster.logging import get_logger, setup_logging


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
        """Log messages are written to the file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=False)
            logger.info("test message 123")

            content = (Path(tmpdir) / "roster.log").read_text()
            assert "test message 123" in content

    def test_log_format(self) -> None:
        """Log entries include level and component name."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=False)
            logging.getLogger("roster.roster_store.store").info("component test")

            content = (Path(tmpdir) / "roster.log").read_text()
            assert " | INFO" in content
            assert " | roster.roster_store.store | component test" in content

    def test_level_from_environment(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch.dict(os.environ, {"ROSTER_LOG_LEVEL": "WARNING"}):
                logger = setup_logging(log_dir=tmpdir, console=False)

            assert logger.level == logging.WARNING

    def test_no_duplicate_handlers(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=True)
            logger = setup_logging(log_dir=tmpdir, console=True)

            assert len(logger.handlers) == 2


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger."""

    def test_prefixes_name(self) -> None:
        assert get_logger("cli").name == "roster.cli"

    def test_keeps_prefixed_name(self) -> None:
        assert get_logger("roster.api").name == "roster.api"
        assert get_logger("roster").name == "roster"
