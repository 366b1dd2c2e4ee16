"""Logging configuration for finspector.

Sets up console logging for the ``finspector`` logger hierarchy. Modules get
their logger through ``get_logger(__name__)`` so records propagate to it.
"""

import logging
from typing import Optional

LOGGER_NAME = "finspector"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Set up application logging with a console handler.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG").

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler (stderr, keeps command output clean)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the application logger, or one of its children.

    Args:
        name: Dotted module name under ``finspector``; None for the root app logger.

    Returns:
        Logger instance.
    """
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
