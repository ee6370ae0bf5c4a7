"""
config.py
Environment + logging bootstrap
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("intakeoff")


def configure_logging(debug: bool | None = None) -> logging.Logger:
    """Load ``.env`` and configure root logging; return the app logger.

    ``debug`` overrides the ``DEBUG_MODE`` environment variable.
    """
    load_dotenv()
    if debug is None:
        debug = os.getenv("DEBUG_MODE", "False").lower() == "true"

    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    logger.debug("Logging configured (debug=%s)", debug)
    return logger


__all__ = ["configure_logging", "logger", "LOG_FORMAT"]
