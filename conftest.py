"""
Root conftest.py — logging fixtures shared by all package tests.

Fixtures:
  debug_logs  — caplog with DEBUG enabled on the simple_undo logger
"""
from __future__ import annotations

import logging

import pytest


# ---------------------------------------------------------------------------
# Logger isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolate_simple_undo_logger():
    """Undo handler/level changes made by configure_logging() during a test."""
    pkg_logger = logging.getLogger("simple_undo")
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    yield
    for handler in list(pkg_logger.handlers):
        if handler not in handlers:
            pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(level)


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="simple_undo")
    return caplog
