"""Pytest configuration and fixtures."""

import logging

import pytest

from matchkit.config import reset_config


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up matchkit loggers after each test so handlers don't leak between tests."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("matchkit"):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()
