"""Shared fixtures."""

import logging

import pytest


@pytest.fixture
def restore_root_logger():
    """Undo handlers and level changes made to the root logger by a test."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
