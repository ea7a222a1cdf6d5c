# tests/conftest.py
from io import StringIO

import pytest
from loguru import logger

from glyphlog.config import get_settings
from glyphlog.default import get_default_logger


@pytest.fixture
def log_path(tmp_path):
    """Path of a log file that does not exist yet."""
    return tmp_path / "test.log"


@pytest.fixture
def diagnostics():
    """Capture glyphlog's own Loguru diagnostics in a StringIO."""
    sink = StringIO()
    handler_id = logger.add(sink, level="DEBUG", format="{level} | {message}")
    yield sink
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_default_logger():
    """Drop the cached default logger and settings after each test."""
    yield
    if get_default_logger.cache_info().currsize:
        get_default_logger().close()
    get_default_logger.cache_clear()
    get_settings.cache_clear()
