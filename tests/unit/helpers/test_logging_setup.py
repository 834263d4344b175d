#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/helpers/test_logging_setup.py
"""Unit tests for CLI logging configuration."""

import logging
from io import StringIO
from pathlib import Path

import pytest

from docx2md.logging_utils import configure_logging


@pytest.fixture
def root_logger() -> logging.Logger:
    """Return the root logger; the autouse conftest fixture restores it afterwards."""
    return logging.getLogger()


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_plain_format(self, root_logger: logging.Logger) -> None:
        """Messages use the short format by default."""
        stream = StringIO()
        configure_logging("warning", stream=stream)

        logging.getLogger("docx2md.sample").warning("careful")

        assert stream.getvalue() == "WARNING: careful\n"
        assert root_logger.level == logging.WARNING

    def test_level_filters(self, root_logger: logging.Logger) -> None:
        """Records below the level are dropped."""
        stream = StringIO()
        configure_logging(logging.ERROR, stream=stream)

        logging.getLogger("docx2md.sample").warning("hidden")

        assert stream.getvalue() == ""

    def test_trace_format(self, root_logger: logging.Logger) -> None:
        """Trace mode adds the logger name."""
        stream = StringIO()
        configure_logging(logging.DEBUG, trace_mode=True, stream=stream)

        logging.getLogger("docx2md.sample").debug("details")

        assert "[DEBUG] [docx2md.sample] details" in stream.getvalue()

    def test_replaces_handlers(self, root_logger: logging.Logger) -> None:
        """Repeated calls do not duplicate console output."""
        stream = StringIO()
        configure_logging("INFO", stream=StringIO())
        configure_logging("INFO", stream=stream)

        logging.getLogger("docx2md.sample").info("once")

        assert stream.getvalue().count("once") == 1

    def test_log_file(self, root_logger: logging.Logger, temp_dir: Path) -> None:
        """A log file receives the same records."""
        log_path = temp_dir / "run.log"
        configure_logging("INFO", log_file=str(log_path), stream=StringIO())

        logging.getLogger("docx2md.sample").info("to file")

        assert "to file" in log_path.read_text(encoding="utf-8")

    def test_unopenable_log_file(self, root_logger: logging.Logger, temp_dir: Path) -> None:
        """A log file that cannot be opened is reported and skipped."""
        stream = StringIO()
        configure_logging("INFO", log_file=str(temp_dir / "missing" / "run.log"), stream=stream)

        assert "Could not open log file" in stream.getvalue()
        assert len(root_logger.handlers) == 1
