"""Tests for logging configuration."""

import logging
from pathlib import Path

from svg_clock.logging.config import configure_logging, get_logger


def test_configure_logging_defaults() -> None:
    """Test logging configuration with defaults."""
    configure_logging()
    logger = logging.getLogger("svg_clock")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_configure_logging_debug_level() -> None:
    """Test logging configuration with DEBUG level."""
    configure_logging(log_level="debug")
    logger = logging.getLogger("svg_clock")
    assert logger.level == logging.DEBUG


def test_configure_logging_replaces_handlers() -> None:
    """Calling configure_logging twice does not duplicate handlers."""
    configure_logging()
    configure_logging()
    assert len(logging.getLogger("svg_clock").handlers) == 1


def test_configure_logging_with_file(tmp_path: Path) -> None:
    """Test logging configuration with file output."""
    log_file = tmp_path / "logs" / "test.log"
    configure_logging(log_level="INFO", log_file=log_file)

    logger = logging.getLogger("svg_clock")
    logger.info("Test message")

    assert log_file.exists()
    assert "Test message" in log_file.read_text()


def test_configure_logging_no_console(tmp_path: Path) -> None:
    """Test logging configuration without console output."""
    log_file = tmp_path / "test.log"
    configure_logging(log_level="INFO", log_file=log_file, enable_console=False)

    logger = logging.getLogger("svg_clock")
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert handler_types == ["FileHandler"]


def test_get_logger() -> None:
    """Test get_logger function."""
    assert get_logger("test_module").name == "svg_clock.test_module"
    assert get_logger("svg_clock.clock.service").name == "svg_clock.clock.service"


def test_logging_format(tmp_path: Path) -> None:
    """Test that log messages have correct format."""
    log_file = tmp_path / "test.log"
    configure_logging(log_level="INFO", log_file=log_file, enable_console=False)

    get_logger("test").info("Test message")

    content = log_file.read_text()
    assert "svg_clock.test" in content
    assert "INFO" in content
    assert "Test message" in content
    assert " | " in content
