"""Defines :class:`.JulianDayNumber` & :class:`.EpochTicks` and the UTC instant normalisation.

Julian Day Numbers and epoch tick counts are both plain integers, so they are easy to mix
up. Subclassing ``int`` keeps them usable anywhere an integer is expected, while any attempt
to combine or compare the two raises a ``TypeError``.

.. code-block:: python

    jdn = julianDayNumber(2000, 1, 1)     # JulianDayNumber(2451545)
    ticks = datetimeToEpochTicks(instant)  # EpochTicks(...)

    jdn + 1        # JulianDayNumber(2451546)
    jdn < ticks    # raises TypeError

"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timezone
from operator import index

# Local Imports
from ..common.exceptions import InstantRangeError
from ..common.logger import chronoconvLogError
from .constants import TICKS_PER_MILLISECOND
from .maths import truncDiv

_MIXED_TYPES_MSG = "Cannot operate between JulianDayNumber/EpochTicks objects, use conversion functions."


def utcInstant(instant: datetime) -> datetime:
    """Return `instant` as an aware UTC ``datetime``.

    Naive datetimes are taken to already be in UTC. Aware datetimes are converted to UTC.

    Args:
        instant (``datetime``): instant to normalise.

    Raises:
        TypeError: `instant` is not a ``datetime``.
        InstantRangeError: converting to UTC leaves years 1-9999.

    Returns:
        ``datetime``: equivalent instant with ``tzinfo=timezone.utc``.
    """
    if not isinstance(instant, datetime):
        chronoconvLogError(f"Error: expected a `datetime.datetime`, got {type(instant)}.")
        raise TypeError(type(instant))

    if instant.tzinfo is None or instant.utcoffset() is None:
        return instant.replace(tzinfo=timezone.utc)
    try:
        return instant.astimezone(timezone.utc)
    except OverflowError as err:
        msg = f"{instant.isoformat()} falls outside years 1-9999 once converted to UTC"
        chronoconvLogError(msg)
        raise InstantRangeError(msg) from err


class _TypedTime(int):
    """Integer time value that refuses to mix with the other typed time value."""

    _other: tuple[type, ...] = ()

    def _guard(self, other):
        if isinstance(other, self._other):
            raise TypeError(f"{type(self).__name__}: {_MIXED_TYPES_MSG}")

    def __add__(self, other):
        self._guard(other)
        return type(self)(int(self) + index(other))

    def __sub__(self, other):
        self._guard(other)
        if isinstance(other, type(self)):
            return int(self) - int(other)
        return type(self)(int(self) - index(other))

    __radd__ = __add__

    def __rsub__(self, other):
        self._guard(other)
        return index(other) - int(self)

    def __mul__(self, other):
        self._guard(other)
        return int(self) * other

    __rmul__ = __mul__

    def __floordiv__(self, other):
        self._guard(other)
        return int(self) // other

    def __mod__(self, other):
        self._guard(other)
        return int(self) % other

    def __truediv__(self, other):
        self._guard(other)
        return int(self) / other

    def __lt__(self, other):
        self._guard(other)
        return int(self) < other

    def __le__(self, other):
        self._guard(other)
        return int(self) <= other

    def __gt__(self, other):
        self._guard(other)
        return int(self) > other

    def __ge__(self, other):
        self._guard(other)
        return int(self) >= other

    def __eq__(self, other):
        self._guard(other)
        return int(self) == other

    def __ne__(self, other):
        self._guard(other)
        return int(self) != other

    def __hash__(self):
        """Override hash to return just the integer representation of the class."""
        return hash(int(self))


class JulianDayNumber(_TypedTime):
    """Integer count of days since the Julian Day epoch (4714-11-24 BCE, proleptic Gregorian).

    Adding or subtracting an integer shifts the day; subtracting two Julian Day Numbers returns
    the plain ``int`` number of days between them.
    """

    def __repr__(self):
        """Return a string representation of this :class:`.JulianDayNumber`."""
        return f"JulianDayNumber({int(self)})"

    def __str__(self):
        return str(int(self))


class EpochTicks(_TypedTime):
    """Count of 100 nanosecond ticks since 1970-01-01T00:00:00Z."""

    @property
    def milliseconds(self) -> int:
        """``int``: whole milliseconds since the epoch, truncated toward zero."""
        return truncDiv(int(self), TICKS_PER_MILLISECOND)

    @classmethod
    def fromMilliseconds(cls, milliseconds: int) -> EpochTicks:
        """Scale a millisecond count since the epoch to ticks, exactly."""
        return cls(index(milliseconds) * TICKS_PER_MILLISECOND)

    def __repr__(self):
        """Return a string representation of this :class:`.EpochTicks`, with its ISO-8601 instant."""
        # Local Imports
        from ..common.exceptions import ArithmeticOverflow, InstantRangeError
        from .epoch import epochTicksToDatetime
        from .iso8601 import formatIso8601

        try:
            iso = formatIso8601(epochTicksToDatetime(self))
        except (ArithmeticOverflow, InstantRangeError):
            iso = "out of range"
        return f"EpochTicks({int(self)}, ISO={iso})"

    def __str__(self):
        return str(int(self))


JulianDayNumber._other = (EpochTicks,)
EpochTicks._other = (JulianDayNumber,)
