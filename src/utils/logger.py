"""Centralised logger for the demographic analytics project."""
from __future__ import annotations

import os
import sys

from loguru import logger

_LOG_LEVEL_ENV = "DEMOGRAPHICS_LOG_LEVEL"


def configure_logger(level: str | None = None) -> None:
    """Route loguru output to stderr at the requested level.

    The level defaults to the ``DEMOGRAPHICS_LOG_LEVEL`` environment variable and
    falls back to ``INFO``.
    """

    resolved = (level or os.environ.get(_LOG_LEVEL_ENV) or "INFO").upper()
    logger.remove()
    logger.add(sys.stderr, level=resolved)


__all__ = ["configure_logger", "logger"]
