"""Utilities for parsing human-friendly duration strings."""

import re
from datetime import timedelta
from typing import Dict, Optional

from .errors import InvalidDurationError, NumberOutOfRangeError
from .log import get_logger

logger = get_logger(__name__)

MILLISECOND = 1
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNIT_FACTORS: Dict[str, int] = {
    "ms": MILLISECOND,
    "milli": MILLISECOND,
    "millis": MILLISECOND,
    "millisecond": MILLISECOND,
    "milliseconds": MILLISECOND,
    "s": SECOND,
    "sec": SECOND,
    "second": SECOND,
    "seconds": SECOND,
    "m": MINUTE,
    "min": MINUTE,
    "minute": MINUTE,
    "minutes": MINUTE,
    "h": HOUR,
    "hr": HOUR,
    "hour": HOUR,
    "hours": HOUR,
}

# Fractional magnitudes are only understood for seconds and minutes.
FRACTIONAL_UNITS = frozenset(
    unit for unit, factor in UNIT_FACTORS.items() if factor in (SECOND, MINUTE)
)


def _alternation(units) -> str:
    return "|".join(sorted(units, key=len, reverse=True))


_BARE_RE = re.compile(r"[+-]?[0-9]+")
_SINGLE_RE = re.compile(rf"([0-9]+)\s*({_alternation(UNIT_FACTORS)})")
_FRACTIONAL_RE = re.compile(rf"([0-9]*\.?[0-9]+)\s*({_alternation(FRACTIONAL_UNITS)})")
_RUN_RE = re.compile(r"([0-9]*\.)?([0-9]+)\s*([a-z]+)")


def is_bare_integer(text: str) -> bool:
    """Return ``True`` if ``text`` is an optional sign followed by digits."""
    return _BARE_RE.fullmatch(text) is not None


def milliseconds(count: int) -> timedelta:
    """Return a timedelta of ``count`` milliseconds, clamping negatives to zero."""
    if count <= 0:
        return timedelta(0)
    try:
        return timedelta(milliseconds=count)
    except OverflowError as exc:
        raise NumberOutOfRangeError(
            f"Number out of range: {count} milliseconds", count
        ) from exc


def _integer(digits: str) -> int:
    try:
        return int(digits)
    except ValueError as exc:  # beyond the interpreter's digit limit
        raise NumberOutOfRangeError(
            f"Number out of range: {digits[:20]}...", digits
        ) from exc


def _scale(magnitude: float, factor: int) -> int:
    try:
        return int(magnitude * factor)
    except OverflowError as exc:
        raise NumberOutOfRangeError(
            f"Number out of range: {magnitude!r} x {factor}", magnitude
        ) from exc


def _parse_multiple_units(expr: str) -> Optional[int]:
    total = 0
    matched = False
    for match in _RUN_RE.finditer(expr):
        fraction, digits, unit = match.groups()
        if fraction is not None:
            logger.debug("skipping fractional run %r in %r", match.group(0), expr)
            continue
        factor = UNIT_FACTORS.get(unit)
        if factor is None:
            logger.debug("skipping unknown unit %r in %r", unit, expr)
            continue
        total += _integer(digits) * factor
        matched = True
    return total if matched else None


def parse_duration(expr: str) -> timedelta:
    """Convert a duration expression into a :class:`~datetime.timedelta`.

    The expression is stripped and lowercased, then resolved by the first
    of these forms that matches it completely:

    1. a bare signed integer, read as milliseconds (``"250"``);
    2. an integer with one unit suffix (``"5s"``, ``"2 minutes"``);
    3. a fractional second or minute value (``"1.5s"``, ``".5m"``);
    4. a run of integer/unit pairs (``"1h2m3s"``, ``"1h 30m"``). Pairs
       with an unknown unit or a fractional magnitude are skipped.

    Units are ``ms``, ``s``, ``m`` and ``h`` together with the longer
    spellings in :data:`UNIT_FACTORS`. Empty input, zero and negative values
    all resolve to a zero timedelta.

    Parameters
    ----------
    expr:
        Duration expression to parse.

    Returns
    -------
    datetime.timedelta
        A non-negative timedelta with millisecond resolution.

    Raises
    ------
    InvalidDurationError
        If the expression matches none of the accepted forms.
    NumberOutOfRangeError
        If the duration is too large to represent as a timedelta.
    """

    expr = expr.strip().lower()
    if not expr:
        return timedelta(0)

    if is_bare_integer(expr):
        logger.debug("resolved %r as bare milliseconds", expr)
        return milliseconds(_integer(expr))

    match = _SINGLE_RE.fullmatch(expr)
    if match:
        value, unit = match.groups()
        logger.debug("resolved %r as a single %r unit", expr, unit)
        return milliseconds(_scale(float(value), UNIT_FACTORS[unit]))

    match = _FRACTIONAL_RE.fullmatch(expr)
    if match:
        value, unit = match.groups()
        logger.debug("resolved %r as a fractional %r unit", expr, unit)
        return milliseconds(_scale(float(value), UNIT_FACTORS[unit]))

    total = _parse_multiple_units(expr)
    if total is not None:
        logger.debug("resolved %r as multiple units", expr)
        return milliseconds(total)

    raise InvalidDurationError(expr)
