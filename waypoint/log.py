"""Logging configuration using loguru.

Intercepts stdlib logging so that anything a host or library logs through
``logging`` flows through loguru with the same format.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from loguru import logger


class _InterceptHandler(logging.Handler):
    """Bridge stdlib logging records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk the call stack so loguru reports the real call-site
        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", sink: TextIO | None = None) -> None:
    """Configure loguru as the sole logging sink.

    Logs go to stderr by default so command output on stdout stays
    machine-readable.  Invocations are short-lived, hence no date in the
    timestamp.
    """
    level = level.upper()

    logger.remove()
    logger.add(
        sink or sys.stderr,
        level=level,
        format=(
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
            "<level>{message}</level>"
        ),
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    logger.debug("Logging initialised (level={})", level)
