"""Pytest configuration and fixtures."""

import logging
import shutil
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp)


@pytest.fixture
def sample_records():
    """Serialized records paired with the reduced pair they must decode to."""
    return [
        ({"num": 24, "den": 1}, (24, 1)),
        ({"num": 30000, "den": 1001}, (30000, 1001)),
        ({"num": 6, "den": 9}, (2, 3)),
        ({"num": 200, "den": 4}, (50, 1)),
    ]


@pytest.fixture
def mock_settings(monkeypatch):
    """Mock application settings for testing."""
    monkeypatch.setenv("FRAMERATE_DEFAULT", "25")
    monkeypatch.setenv("FRAMERATE_JSON_INDENT", "")
    monkeypatch.delenv("FRAMERATE_LOG_FILE", raising=False)
    monkeypatch.delenv("VERBOSE_LOGGING", raising=False)
    from framerate.config import AppSettings
    return AppSettings.from_env()


@pytest.fixture
def restore_root_logger():
    """Remove handlers a test adds to the root logger."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
