import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level=None):
    """Send ``pong_game`` log records to stdout.

    Without an explicit level, ``PONG_LOG_LEVEL`` is used (INFO when unset).
    """
    if level is None:
        level = os.environ.get("PONG_LOG_LEVEL", "INFO").upper()

    logger = logging.getLogger("pong_game")
    logger.setLevel(level)
    # Calling it twice must not duplicate output
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
