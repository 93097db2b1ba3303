"""Pytest configuration and shared fixtures."""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks installed by cli.main so they never outlive a captured stream."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
