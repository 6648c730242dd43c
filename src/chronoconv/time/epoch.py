"""Conversions between instants, 100 ns ticks and millisecond counts since the Unix epoch.

Ticks come in two flavours:

* native ticks, counted from 0001-01-01T00:00:00, the origin of :attr:`datetime.datetime.min`;
* epoch ticks, counted from 1970-01-01T00:00:00Z.

They differ by the constant :data:`.EPOCH_OFFSET`. Millisecond counts are the coarse
interchange form of epoch ticks and scale by exactly :data:`.TICKS_PER_MILLISECOND`.

Note:
    ``datetime`` resolves microseconds, i.e. 10 ticks. Converting ticks to a ``datetime``
    therefore drops any remainder below one microsecond. Every conversion from a ``datetime``
    is exact, except :func:`.datetimeToMilliseconds` which truncates toward zero.
"""

from __future__ import annotations

# Standard Library Imports
import re
from datetime import datetime, timedelta, timezone
from operator import index

# Local Imports
from ..common.exceptions import InstantRangeError, ParseError
from ..common.labels import ParseFailure
from ..common.logger import chronoconvLogError
from .constants import (
    EPOCH_OFFSET,
    MAX_TICKS,
    SECONDS_PER_DAY,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_SECOND,
)
from .maths import checkInt64, overflowChecked, truncDiv
from .stardate import EpochTicks, utcInstant

_TICK_ORIGIN = datetime.min.replace(tzinfo=timezone.utc)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def datetimeToTicks(instant: datetime) -> int:
    """Return the native tick count of `instant`, exactly.

    Args:
        instant (``datetime``): instant to convert, naive datetimes are taken as UTC.

    Returns:
        ``int``: 100 ns ticks since 0001-01-01T00:00:00Z.
    """
    delta = utcInstant(instant) - _TICK_ORIGIN
    seconds = delta.days * SECONDS_PER_DAY + delta.seconds
    return seconds * TICKS_PER_SECOND + delta.microseconds * TICKS_PER_MICROSECOND


def ticksToDatetime(ticks: int) -> datetime:
    """Return the UTC instant of a native tick count.

    Args:
        ticks (``int``): 100 ns ticks since 0001-01-01T00:00:00Z.

    Raises:
        InstantRangeError: `ticks` is negative or later than 9999-12-31T23:59:59.9999999Z.

    Returns:
        ``datetime``: aware UTC instant, truncated to the microsecond.
    """
    ticks = int(index(ticks))
    if not 0 <= ticks <= MAX_TICKS:
        msg = f"Ticks {ticks} fall outside the representable range [0, {MAX_TICKS}]"
        chronoconvLogError(msg)
        raise InstantRangeError(msg)

    return _TICK_ORIGIN + timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def datetimeToEpochTicks(instant: datetime) -> EpochTicks:
    """Return the ticks elapsed between the Unix epoch and `instant`, exactly."""
    return EpochTicks(datetimeToTicks(instant) - EPOCH_OFFSET)


def epochTicksToDatetime(epoch_ticks: int) -> datetime:
    """Return the UTC instant lying `epoch_ticks` after the Unix epoch.

    See Also:
        :func:`.ticksToDatetime` for the range and precision rules.
    """
    ticks = int(index(epoch_ticks)) + EPOCH_OFFSET
    if overflowChecked():
        checkInt64(ticks, "Native tick count")
    return ticksToDatetime(ticks)


def parseMilliseconds(milliseconds: str | None) -> int:
    """Parse a signed, base 10 millisecond count.

    Args:
        milliseconds (``str``): text to parse. ``None``, empty and whitespace-only text
            count as ``"0"``; surrounding whitespace is ignored.

    Raises:
        ParseError: the text is not an optionally signed run of ASCII digits.
        ArithmeticOverflow: the value does not fit a signed 64-bit integer, unless
            ``conversion.CheckInt64Overflow`` is disabled.

    Returns:
        ``int``: parsed millisecond count.
    """
    text = "" if milliseconds is None else milliseconds.strip()
    if not text:
        return 0

    if not _INTEGER_PATTERN.fullmatch(text):
        error = ParseError(milliseconds, ParseFailure.NUMERIC, "expected a signed integer")
        chronoconvLogError(f"Error: {error}")
        raise error

    value = int(text)
    if overflowChecked():
        checkInt64(value, "Millisecond count")
    return value


def millisecondsToDatetime(milliseconds: str | int | None) -> datetime:
    """Return the UTC instant lying `milliseconds` after the Unix epoch.

    Computes ``ticks = milliseconds * 10000 + EPOCH_OFFSET`` and converts the ticks with
    :func:`.ticksToDatetime`. The scaling is exact, so no precision is lost.

    Args:
        milliseconds (``str`` | ``int``): millisecond count, or its text as accepted by
            :func:`.parseMilliseconds`.

    Raises:
        ParseError: textual input is not an integer.
        ArithmeticOverflow: the count or the tick value leaves the signed 64-bit range.
        InstantRangeError: the instant falls outside years 1-9999.

    Returns:
        ``datetime``: aware UTC instant.
    """
    if milliseconds is None or isinstance(milliseconds, str):
        milliseconds = parseMilliseconds(milliseconds)
    elif isinstance(milliseconds, bool):
        chronoconvLogError("Error: `milliseconds` must be an integer or a string, not a bool.")
        raise TypeError(type(milliseconds))
    else:
        milliseconds = int(index(milliseconds))

    ticks = milliseconds * TICKS_PER_MILLISECOND + EPOCH_OFFSET
    if overflowChecked():
        checkInt64(milliseconds, "Millisecond count")
        checkInt64(ticks, "Native tick count")
    return ticksToDatetime(ticks)


def datetimeToMilliseconds(instant: datetime) -> int:
    """Return the whole milliseconds between the Unix epoch and `instant`.

    This is the one lossy conversion: ``(ticks - EPOCH_OFFSET) / 10000`` with the division
    truncating toward zero. Any sub-millisecond remainder is discarded, never rounded, so
    instants before 1970 move forward to the next millisecond boundary and instants after 1970
    move back.

    Args:
        instant (``datetime``): instant to convert, naive datetimes are taken as UTC.

    Returns:
        ``int``: signed millisecond count.
    """
    return truncDiv(datetimeToTicks(instant) - EPOCH_OFFSET, TICKS_PER_MILLISECOND)
