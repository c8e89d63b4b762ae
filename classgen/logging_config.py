"""Logging setup for classgen.

Modules obtain their logger through :func:`get_logger` so that every logger
lives under the ``classgen`` namespace and can be configured in one place.
"""

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "classgen"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``classgen`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger with a single stream handler.

    Calling this more than once replaces the previous handler instead of
    stacking a new one.

    Args:
        level: Logging level name or number
        fmt: Log record format, defaults to DEFAULT_FORMAT

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger


# Library default: stay silent unless the application configures logging.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
