"""Blocking sleep helpers that accept integers, strings or timedeltas."""

import enum
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

from .durations import is_bare_integer, milliseconds, parse_duration
from .errors import NumberOutOfRangeError
from .log import get_logger

logger = get_logger(__name__)

SleepValue = Union[int, str, timedelta, "SleepInput"]


class SleepInputKind(enum.Enum):
    NUMBER = "number"
    TEXT = "text"
    DURATION = "duration"


@dataclass(frozen=True)
class SleepInput:
    """A sleep request tagged with the kind of value it was built from.

    Integers are milliseconds, strings go through :func:`parse_duration`
    and timedeltas are used as they are.
    """

    kind: SleepInputKind
    value: Union[int, str, timedelta]

    @classmethod
    def coerce(cls, value: SleepValue) -> "SleepInput":
        if isinstance(value, SleepInput):
            return value
        # bool is an int subclass but never a meaningful millisecond count
        if isinstance(value, bool):
            raise TypeError("sleep input must be int, str or timedelta, not bool")
        if isinstance(value, int):
            return cls(SleepInputKind.NUMBER, value)
        if isinstance(value, str):
            return cls(SleepInputKind.TEXT, value)
        if isinstance(value, timedelta):
            return cls(SleepInputKind.DURATION, value)
        raise TypeError(
            f"sleep input must be int, str or timedelta, not {type(value).__name__}"
        )

    def should_sleep(self) -> bool:
        """Return ``False`` when the input obviously asks for no wait at all.

        Only integers and strings that are plain integers are checked here;
        text such as ``"0s"`` is left for :meth:`to_duration` to resolve.
        """
        if self.kind is SleepInputKind.NUMBER:
            return self.value > 0
        if self.kind is SleepInputKind.TEXT:
            if is_bare_integer(self.value):
                try:
                    return int(self.value) > 0
                except ValueError:  # past the int conversion digit limit
                    return True
            return True
        return self.value != timedelta(0)

    def to_duration(self) -> timedelta:
        if self.kind is SleepInputKind.NUMBER:
            return milliseconds(self.value)
        if self.kind is SleepInputKind.TEXT:
            return parse_duration(self.value)
        return max(self.value, timedelta(0))


def _block(seconds: float) -> None:
    try:
        time.sleep(seconds)
    except OverflowError as exc:
        raise NumberOutOfRangeError(
            f"Number out of range: cannot sleep for {seconds!r} seconds", seconds
        ) from exc


def sleep_for(duration: timedelta) -> None:
    """Block for ``duration``, even when it is zero."""
    seconds = max(duration.total_seconds(), 0)
    logger.debug("sleeping for %.3fs", seconds)
    _block(seconds)


def smart_sleep(value: SleepValue) -> None:
    """Sleep for a duration given as milliseconds, text or a timedelta.

    Zero and negative inputs return immediately without sleeping. Strings
    accept every form understood by :func:`parse_duration`, e.g. ``"250"``,
    ``"1.5s"`` or ``"1m30s"``.

    Raises
    ------
    InvalidDurationError
        If a string input cannot be parsed.
    NumberOutOfRangeError
        If the duration is too long to sleep for.
    TypeError
        If ``value`` is not an int, str, timedelta or :class:`SleepInput`.
    """
    sleep_input = SleepInput.coerce(value)
    if not sleep_input.should_sleep():
        logger.debug("skipping sleep for %r", sleep_input.value)
        return
    duration = sleep_input.to_duration()
    logger.debug("sleeping for %s (from %r)", duration, sleep_input.value)
    _block(duration.total_seconds())
