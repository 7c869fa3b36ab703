"""Logging configuration helpers for the quiz service."""

from __future__ import annotations

import logging
from logging import Logger

from daily_quiz.core.config import settings


def configure_logging(level: str | None = None) -> Logger:
    """Configure basic logging for the application and return the package logger."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("daily_quiz")
