"""Logging setup for the reviewshelf logger hierarchy"""

import logging
import sys


LOGGER_NAME = "reviewshelf"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send package logs to the current stderr: WARNING and up, or everything when verbose.

    Replaces the handler from any earlier call, so repeated CLI invocations never stack handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
