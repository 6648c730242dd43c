"""Hold common label types for easier importing."""

from __future__ import annotations

# Standard Library Imports
from enum import Enum, unique


@unique
class ParseFailure(str, Enum):
    """Defines which validation step rejected a piece of text."""

    LENGTH: str = "length"
    """``str``: text is not a string of the required length."""

    SEPARATOR: str = "separator"
    """``str``: a literal separator (``-``, ``T``, ``:``, ``Z``) is missing or misplaced."""

    NUMERIC: str = "numeric"
    """``str``: a numeric field holds something other than decimal digits."""

    CALENDAR: str = "calendar"
    """``str``: fields are well-formed but describe an impossible date or time."""
