"""Logging setup for the ``game_catalog`` logger tree.

Only the package logger is configured; the host application's root
logger and handlers are left alone. Records still propagate upward.
"""

import logging
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "game_catalog"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name to its number. Unknown names give INFO."""
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Attach catalog handlers to ``logger_name`` once.

    Adds a console handler, plus a UTF-8 file handler when ``logfile`` is
    given. A logger that already has handlers is returned untouched, so
    repeated ``create_catalog`` calls don't duplicate output.

    Args:
        level: Logging level name, case insensitive.
        logfile: Optional path for the log file.
        logger_name: Logger to configure.

    Returns:
        The configured logger
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger

    logger.setLevel(resolve_level(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
