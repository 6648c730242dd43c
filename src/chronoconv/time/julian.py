"""Proleptic Gregorian calendar date to Julian Day Number conversion.

Only the forward direction is provided. The algorithm is the standard integer form from
Fliegel & Van Flandern (1968), in which every division truncates toward zero.

References:
    * Fliegel, H. F. & Van Flandern, T. C., "A Machine Algorithm for Processing Calendar Dates",
      Communications of the ACM 11(10), 1968.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import date, datetime
from operator import index

# Third Party Imports
import numpy as np
from numpy import ndarray

# Local Imports
from ..common.exceptions import ArithmeticOverflow
from ..common.logger import chronoconvLogError
from .constants import INT64_MAX
from .maths import checkInt64, overflowChecked, truncDiv, truncDivArray
from .stardate import JulianDayNumber, utcInstant

_ARRAY_INPUT_LIMIT: int = (INT64_MAX - 10**8) // 3700
"""``int``: magnitude below which no intermediate of the array form can leave ``int64``."""


def julianDayNumber(year: int, month: int, day: int) -> JulianDayNumber:
    """Return the Julian Day Number of a proleptic Gregorian calendar date.

    Month and day are not range checked: out-of-range values give a well-defined but
    calendrically meaningless number, e.g. month 13 behaves like January of the next year.

    Examples:
        >>> julianDayNumber(2000, 1, 1)
        JulianDayNumber(2451545)

    Args:
        year (``int``): proleptic Gregorian year, astronomical numbering.
        month (``int``): month of the year, 1-12.
        day (``int``): day of the month, 1-31.

    Raises:
        ArithmeticOverflow: an input, intermediate or the result leaves the signed 64-bit
            range, unless ``conversion.CheckInt64Overflow`` is disabled.

    Returns:
        :class:`.JulianDayNumber`: Julian Day Number of the given date.
    """
    year, month, day = index(year), index(month), index(day)
    checked = overflowChecked()
    if checked:
        for name, value in (("year", year), ("month", month), ("day", day)):
            checkInt64(value, name)

    year_term = 1461 * (year + 4800 + truncDiv(month - 14, 12))
    if checked:
        checkInt64(year_term, "Julian Day year term")

    jd = day - 32075 + truncDiv(year_term, 4)
    jd = jd + truncDiv(367 * (month - 2 - truncDiv(month - 14, 12) * 12), 12)
    jd = jd - truncDiv(3 * truncDiv(year + 4900 + truncDiv(month - 14, 12), 100), 4)

    if checked:
        checkInt64(jd, "Julian Day Number")
    return JulianDayNumber(jd)


def datetimeToJulianDay(instant: date) -> JulianDayNumber:
    """Return the Julian Day Number of the UTC calendar date of `instant`.

    Args:
        instant (``datetime`` | ``date``): instant or plain calendar date. Datetimes are
            normalised to UTC first, see :func:`.utcInstant`.

    Returns:
        :class:`.JulianDayNumber`: see :func:`.julianDayNumber`.
    """
    if isinstance(instant, datetime):
        instant = utcInstant(instant)
    elif not isinstance(instant, date):
        chronoconvLogError(f"Error: expected a `datetime.date`, got {type(instant)}.")
        raise TypeError(type(instant))

    return julianDayNumber(instant.year, instant.month, instant.day)


def julianDayNumberArray(years, months, days) -> ndarray:
    """Vectorised :func:`.julianDayNumber` over broadcastable integer arrays.

    Args:
        years (``array_like``): proleptic Gregorian years.
        months (``array_like``): months of the year.
        days (``array_like``): days of the month.

    Raises:
        TypeError: an input does not hold integers.
        ArithmeticOverflow: an input is large enough that ``int64`` arithmetic could wrap,
            unless ``conversion.CheckInt64Overflow`` is disabled.

    Returns:
        ``ndarray``: ``int64`` Julian Day Numbers, broadcast to the common shape of the inputs.
    """
    arrays = []
    for name, values in (("years", years), ("months", months), ("days", days)):
        values = np.asarray(values)  # noqa: PLW2901
        if not np.issubdtype(values.dtype, np.integer):
            chronoconvLogError(f"Error: {name} must hold integers, got dtype {values.dtype}.")
            raise TypeError(values.dtype)
        arrays.append(values.astype(np.int64))

    year, month, day = np.broadcast_arrays(*arrays)
    if overflowChecked():
        for name, values in (("years", year), ("months", month), ("days", day)):
            if np.any(values > _ARRAY_INPUT_LIMIT) or np.any(values < -_ARRAY_INPUT_LIMIT):
                msg = f"{name} exceed {_ARRAY_INPUT_LIMIT} in magnitude, int64 arithmetic would wrap"
                chronoconvLogError(msg)
                raise ArithmeticOverflow(msg)

    jd = day - 32075 + truncDivArray(1461 * (year + 4800 + truncDivArray(month - 14, 12)), 4)
    jd = jd + truncDivArray(367 * (month - 2 - truncDivArray(month - 14, 12) * 12), 12)
    jd = jd - truncDivArray(3 * truncDivArray(year + 4900 + truncDivArray(month - 14, 12), 100), 4)

    return jd
