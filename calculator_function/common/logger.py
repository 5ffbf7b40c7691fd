"""Shared logger for the calculator function."""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger("calculator_function")


def configure_logger(level: str = "INFO") -> logging.Logger:
    """
    Attach a stream handler to the shared logger and set its level.

    Calling this more than once only updates the level, so warm invocations
    never stack duplicate handlers.

    :param str level: Logging level name (e.g. ``"DEBUG"``, ``"WARNING"``)

    :return: The configured shared logger
    :rtype: logging.Logger
    """
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level.upper())
    return logger
