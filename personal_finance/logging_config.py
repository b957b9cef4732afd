"""Logging configuration for the application."""

import logging

from personal_finance.config import Settings

ROOT_LOGGER_NAME = "personal_finance"

DEBUG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Configure the package logger.

    Every module logs through logging.getLogger(__name__), so all
    records end up under the "personal_finance" logger configured here.
    Calling this twice replaces the handlers instead of duplicating them.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL)
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt=DEBUG_FORMAT if settings.DEBUG else DEFAULT_FORMAT,
        datefmt="%H:%M:%S" if settings.DEBUG else "%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)

    logger.info(
        "Logging initialized",
        extra={"environment": settings.ENVIRONMENT},
    )
    return logger
