"""Contains all the custom-defined exceptions used in chronoconv."""

from __future__ import annotations

# Local Imports
from .labels import ParseFailure


class ParseError(ValueError):
    """Exception indicating that text does not encode a valid instant or integer.

    Attributes:
        text (``object``): the offending input, as given by the caller.
        kind (:class:`.ParseFailure`): which validation step failed.
    """

    def __init__(self, text: object, kind: ParseFailure, detail: str = ""):
        """Build the error from the rejected input and the failed validation step."""
        self.text = text
        self.kind = ParseFailure(kind)
        message = f"Invalid {self.kind.value} in {text!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ArithmeticOverflow(OverflowError):
    """Exception indicating that a conversion left the signed 64-bit integer range."""


class InstantRangeError(ValueError):
    """Exception indicating that a tick count has no representable calendar instant."""
