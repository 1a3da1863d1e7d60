"""
Pytest configuration and fixtures for chatstream unit tests.

Unit tests are pure: no network, no files outside tmp_path.
"""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def restore_logger():
    """
    Reset loguru sinks after each test.

    The CLI replaces the default sink; this puts it back so later tests
    do not write to a closed CliRunner stream.
    """
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


def pytest_collection_modifyitems(items):
    """Automatically add 'unit' marker to all tests in /unit/."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
