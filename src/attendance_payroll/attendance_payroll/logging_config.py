"""Process logging for the payroll app.

Module loggers (``logging.getLogger(__name__)``) propagate to the package
logger configured here; call :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = __name__.rpartition(".")[0]
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | int = "INFO", *, stream=None) -> logging.Logger:
    """Attach a single stream handler to the package logger (idempotent)."""
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Remove the handler installed by configure_logging (used by tests)."""
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
