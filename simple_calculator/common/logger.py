"""Package-wide logger."""
import logging
import sys
from typing import Union

LOGGER_NAME = "simple_calculator"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger and set its level.

    Calling this more than once replaces the previous stream handler.

    :param level: Logging level name ("DEBUG") or number

    :return: The configured package logger
    :rtype: logging.Logger
    """
    if isinstance(level, str):
        level = level.upper()

    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
