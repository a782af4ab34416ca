"""Logging helpers for notion2md."""

from __future__ import annotations

import logging

from notion2md.config import NOTION2MD_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the notion2md namespace."""
    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> None:
    """Attach a stderr handler to the ``notion2md`` logger.

    Args:
        level: Level name such as ``"DEBUG"``. Falls back to
            ``NOTION2MD_LOG_LEVEL`` and then ``WARNING`` for unknown names.
    """
    level_name = (level or NOTION2MD_LOG_LEVEL).upper()
    if level_name not in _VALID_LEVELS:
        level_name = "WARNING"

    root = logging.getLogger("notion2md")
    root.setLevel(level_name)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
