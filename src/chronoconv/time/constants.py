"""Time conversion constants.

Tick values are 100 nanosecond units. "Native" ticks count from 0001-01-01T00:00:00, the
origin of :attr:`datetime.datetime.min`, and "epoch" ticks count from 1970-01-01T00:00:00Z.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timezone

# Third Party Imports
from numpy import iinfo, int64

EPOCH_OFFSET: int = 621355968000000000
"""``int``: native tick value of 1970-01-01T00:00:00Z, the "Esri epoch"."""

EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""``datetime``: instant at which epoch ticks and millisecond counts are zero."""

TICKS_PER_MICROSECOND: int = 10
TICKS_PER_MILLISECOND: int = 10000
TICKS_PER_SECOND: int = 10000000
SECONDS_PER_DAY: int = 86400

MAX_TICKS: int = 3155378975999999999
"""``int``: native tick value of 9999-12-31T23:59:59.9999999Z, the last representable tick."""

INT64_MIN: int = int(iinfo(int64).min)
INT64_MAX: int = int(iinfo(int64).max)

ISO8601_FORMAT: str = "yyyy-MM-ddTHH:mm:ssZ"
"""``str``: layout of the only accepted ISO-8601 form, e.g. ``2008-05-01T08:30:52Z``."""

ISO8601_LENGTH: int = len(ISO8601_FORMAT)
