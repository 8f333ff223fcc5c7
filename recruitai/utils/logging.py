"""Logging setup for RecruitAI.

Every module logs through a child of the ``recruitai`` logger, obtained with
``get_logger(__name__)``. The CLI calls ``configure_logging`` once to attach a
single stderr handler; library users who skip it get standard propagation to
their own root logger.
"""

import logging
import sys

LOGGER_NAME = "recruitai"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handler installed by configure_logging, if any
_handler: logging.Handler | None = None


def _resolve_level(level: str | None) -> int:
    if level is None:
        return logging.INFO
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def configure_logging(
    level: str | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Attach the stderr handler to the application logger and set its level.

    Calling it again only changes the level; the handler is installed once.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown or
            missing names fall back to INFO.
        format_string: Format string for log records.
        date_format: Format string for timestamps.

    Returns:
        The ``recruitai`` logger.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
        logger.handlers.clear()
        logger.addHandler(_handler)
        logger.propagate = False

    _handler.setLevel(log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the application logger for a module.

    Accepts a module ``__name__`` (``recruitai.matching.service``) or a bare
    suffix (``matching.service``); both give the same logger.
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Remove the installed handler and restore defaults (useful for testing)."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    _handler = None
