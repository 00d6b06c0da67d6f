"""Logging helpers for the fasta-clean CLI."""

from __future__ import annotations

import logging

LOGGER_NAME = "fasta_clean"

LOG_LEVELS = {
    "off": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


def resolve_level(name: str) -> int:
    """Map a level name such as ``Info`` or ``debug`` to a logging level."""

    try:
        return LOG_LEVELS[name.strip().lower()]
    except KeyError:
        choices = ", ".join(LOG_LEVELS)
        raise ValueError(f"Unknown log level {name!r} (expected one of: {choices})") from None


def configure_logging(level: str = "info", verbose: bool = False) -> logging.Logger:
    """Configure root logger and return the package logger."""

    numeric_level = logging.DEBUG if verbose else resolve_level(level)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.debug("Logging initialised at level %s", logging.getLevelName(numeric_level))
    return logger


def get_logger() -> logging.Logger:
    """Return the package logger."""

    return logging.getLogger(LOGGER_NAME)
