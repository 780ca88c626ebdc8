"""Logging configuration for the café directory service.

``setup_logging`` attaches a console handler to the root logger the first
time it is called. Later calls only adjust the level, so the test client
and uvicorn reloads can re-run the lifespan safely.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"). Case insensitive.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
