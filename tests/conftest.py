"""Shared fixtures for articlepull tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_articlepull_logger():
    """Undo handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("articlepull")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
