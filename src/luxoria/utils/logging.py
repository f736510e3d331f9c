"""Logging helpers for luxoria.

Every module logs through a child of the ``"luxoria"`` logger.  The package
logger gets a single console handler the first time :func:`get_logger` runs;
its level comes from ``LUXORIA_LOG_LEVEL`` (``DEBUG`` shows one record per
adjustment pass) and falls back to ``INFO``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "LUXORIA_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOGGER: Optional[logging.Logger] = None


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    # ``getLevelName`` answers unknown names with a "Level x" string.
    return level if isinstance(level, int) else logging.INFO


def get_logger() -> logging.Logger:
    """Return the package logger, attaching a console handler on first use."""

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("luxoria")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(_level_from_env())
    return _LOGGER

