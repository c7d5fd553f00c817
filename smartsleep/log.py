import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "smartsleep"
LOG_FORMAT = "[%(asctime)s] %(levelname)s> %(message)s"
DATE_FORMAT = "%H:%M:%S"


class ConsoleHandler(logging.StreamHandler):
    """Stream handler installed by :func:`configure_logging`."""

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__(stream if stream is not None else sys.stderr)
        self.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level=logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling this again only adjusts the level; it never stacks a second
    handler onto the logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    handler = next(
        (h for h in logger.handlers if isinstance(h, ConsoleHandler)), None
    )
    if handler is None:
        handler = ConsoleHandler(stream)
        logger.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)
    logger.setLevel(level)
    return logger
