"""Exception hierarchy for duration parsing and sleeping."""

from typing import Any, Optional


class SleepError(Exception):
    """Base exception for smartsleep errors.

    Keeps the user-facing message separate from the offending value so
    callers can log or re-render either.
    """

    def __init__(self, user_message: str, value: Any = None) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.value = value


class InvalidDurationError(SleepError, ValueError):
    """Raised when a duration string matches none of the accepted forms."""

    def __init__(self, value: str, user_message: Optional[str] = None) -> None:
        super().__init__(user_message or f"Invalid duration format: '{value}'", value)


class ParseError(SleepError, ValueError):
    """Raised by input adapters when a value cannot be read at all."""


class NumberOutOfRangeError(SleepError, OverflowError):
    """Raised when a millisecond count does not fit a timedelta."""
