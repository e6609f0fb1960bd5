"""Logging setup for the ``cercaclasse`` logger."""

import logging
import os
import sys

from cercaclasse.config import settings

IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"


def setup_logging() -> logging.Logger:
    logger = logging.getLogger("cercaclasse")
    logger.setLevel(settings.log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(settings.log_level)

    if IS_PRODUCTION:
        fmt = "%(asctime)s - %(levelname)s - %(message)s"
    else:
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S"))

    if not logger.handlers:
        logger.addHandler(handler)

    return logger


logger = setup_logging()


def sanitize_for_log(value: str | None, max_length: int = 100) -> str:
    """Shorten user input for log lines."""
    if not value:
        return "[empty]"
    if len(value) > max_length:
        return value[:max_length] + "..."
    return value
