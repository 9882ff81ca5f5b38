"""
App metadata and logging configuration.

The library itself never installs handlers; configure_logging() is meant
for the CLI and for applications that want simple_undo's debug records.
"""
from __future__ import annotations

import logging
import os


APP_NAME: str = "simple-undo"
VERSION: str = "0.1.0"

ENV_LOG_LEVEL: str = "SIMPLE_UNDO_LOG_LEVEL"
DEFAULT_LOG_LEVEL: int = logging.WARNING

LOGGER_NAME: str = "simple_undo"
_HANDLER_NAME: str = "simple_undo.console"


def get_log_level() -> int:
    """Log level from SIMPLE_UNDO_LOG_LEVEL, falling back to WARNING."""
    raw = os.environ.get(ENV_LOG_LEVEL, "").strip()
    if not raw:
        return DEFAULT_LOG_LEVEL
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def configure_logging(level: int | None = None) -> logging.Logger:
    """
    Attach a single stderr handler to the simple_undo logger.

    Calling it again replaces the handler it installed previously.
    """
    pkg_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(pkg_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(get_log_level() if level is None else level)
    return pkg_logger
