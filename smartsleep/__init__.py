"""smartsleep - parse human-friendly durations and sleep for them."""

from .durations import UNIT_FACTORS, parse_duration
from .errors import InvalidDurationError, NumberOutOfRangeError, ParseError, SleepError
from .log import configure_logging, get_logger
from .sleeping import SleepInput, SleepInputKind, sleep_for, smart_sleep

__all__ = [
    "parse_duration",
    "sleep_for",
    "smart_sleep",
    "SleepInput",
    "SleepInputKind",
    "UNIT_FACTORS",
    "SleepError",
    "InvalidDurationError",
    "ParseError",
    "NumberOutOfRangeError",
    "configure_logging",
    "get_logger",
]

__version__ = "0.1.0"
