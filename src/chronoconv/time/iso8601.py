"""Strict codec for the ``YYYY-MM-DDTHH:MM:SSZ`` form of ISO-8601.

This is deliberately not a general ISO-8601 parser: exactly one layout is produced and
accepted, always second precision, always UTC with a literal ``Z`` designator.

References:
    * https://en.wikipedia.org/wiki/ISO_8601
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timezone

# Local Imports
from ..common.exceptions import ParseError
from ..common.labels import ParseFailure
from ..common.logger import chronoconvLogError
from .constants import ISO8601_LENGTH
from .stardate import utcInstant

_SEPARATORS: dict[int, str] = {4: "-", 7: "-", 10: "T", 13: ":", 16: ":", 19: "Z"}
"""``dict``: index of each literal character in the pattern."""

_FIELDS: tuple[tuple[str, slice], ...] = (
    ("year", slice(0, 4)),
    ("month", slice(5, 7)),
    ("day", slice(8, 10)),
    ("hour", slice(11, 13)),
    ("minute", slice(14, 16)),
    ("second", slice(17, 19)),
)
"""``tuple``: name and position of each numeric field in the pattern."""

_DIGITS = frozenset("0123456789")


def formatIso8601(instant: datetime) -> str:
    """Encode `instant` as ``YYYY-MM-DDTHH:MM:SSZ``.

    Sub-second precision is dropped, not rounded. Naive datetimes are taken as UTC and aware
    datetimes are converted to UTC first, see :func:`.utcInstant`.

    Args:
        instant (``datetime``): instant to encode.

    Returns:
        ``str``: 20 character, zero-padded ISO-8601 text.
    """
    utc = utcInstant(instant)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}Z"
    )


def _fail(text: object, kind: ParseFailure, detail: str = ""):
    error = ParseError(text, kind, detail)
    chronoconvLogError(f"Error: {error}")
    raise error


def parseIso8601(text: str) -> datetime:
    """Decode ``YYYY-MM-DDTHH:MM:SSZ`` text into an aware UTC ``datetime``.

    Validation happens in order: length, separators, digits, then calendar range, and the
    first failing step is reported as the error's :attr:`.ParseError.kind`.

    Args:
        text (``str``): text in the exact layout produced by :func:`.formatIso8601`.

    Raises:
        ParseError: `text` does not match the layout or names an impossible instant.

    Returns:
        ``datetime``: decoded instant with ``tzinfo=timezone.utc``.
    """
    if not isinstance(text, str) or len(text) != ISO8601_LENGTH:
        _fail(text, ParseFailure.LENGTH, f"expected {ISO8601_LENGTH} characters")

    for index, separator in _SEPARATORS.items():
        if text[index] != separator:
            _fail(text, ParseFailure.SEPARATOR, f"expected {separator!r} at position {index}")

    values = {}
    for name, span in _FIELDS:
        field = text[span]
        if not _DIGITS.issuperset(field):
            _fail(text, ParseFailure.NUMERIC, f"{name} field {field!r} is not a number")
        values[name] = int(field)

    try:
        return datetime(tzinfo=timezone.utc, **values)
    except ValueError as err:
        _fail(text, ParseFailure.CALENDAR, str(err))
