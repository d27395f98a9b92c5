"""Tests for logging utilities."""

import sys

import pytest
from loguru import logger

from vmafgraph.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the default loguru handler after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_setup_logging_level(capsys):
    """Test messages below the level are dropped."""
    setup_logging("warning")
    logger.info("hidden message")
    logger.warning("shown message")
    captured = capsys.readouterr()
    assert "hidden message" not in captured.err
    assert "WARNING" in captured.err
    assert "shown message" in captured.err
    assert captured.out == ""


def test_setup_logging_file(tmp_path):
    """Test messages are written to the log file."""
    log_file = tmp_path / "vmafgraph.log"
    setup_logging("DEBUG", log_file)
    logger.debug("file message")
    logger.remove()  # closes the file sink
    assert "file message" in log_file.read_text()
