"""Shared pytest fixtures."""

import logging

import pytest

from shapekit.config import reset_settings


@pytest.fixture(autouse=True)
def default_geometry_settings():
    """Run every test with the default geometry settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def restore_root_logger():
    """Remove handlers added by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
