"""Integer helpers that give the conversions fixed-width, truncating semantics.

Python's ``//`` floors toward negative infinity, while the conversions are defined with
division that truncates toward zero. The two disagree whenever the dividend is negative,
e.g. ``-13 // 12 == -2`` but ``truncDiv(-13, 12) == -1``.
"""

from __future__ import annotations

# Third Party Imports
import numpy as np
from numpy import ndarray

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import ArithmeticOverflow
from ..common.logger import chronoconvLogError
from .constants import INT64_MAX, INT64_MIN


def truncDiv(dividend: int, divisor: int) -> int:
    """Divide two integers, truncating the quotient toward zero.

    Args:
        dividend (``int``): numerator.
        divisor (``int``): denominator, non-zero.

    Returns:
        ``int``: integer quotient with any fractional part discarded.
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def truncDivArray(dividend: ndarray, divisor: int) -> ndarray:
    """Element-wise :func:`.truncDiv` for integer arrays and a positive `divisor`."""
    return np.sign(dividend) * (np.abs(dividend) // divisor)


def overflowChecked() -> bool:
    """Return whether conversions should enforce the signed 64-bit range."""
    return BehavioralConfig.getConfig().conversion.CheckInt64Overflow


def checkInt64(value: int, description: str) -> int:
    """Ensure `value` fits in a signed 64-bit integer.

    Args:
        value (``int``): intermediate or final result of a conversion.
        description (``str``): what `value` represents, used in the error message.

    Raises:
        ArithmeticOverflow: `value` lies outside ``[-2**63, 2**63 - 1]``.

    Returns:
        ``int``: `value`, unchanged.
    """
    if not INT64_MIN <= value <= INT64_MAX:
        msg = f"{description} {value} exceeds the signed 64-bit range"
        chronoconvLogError(msg)
        raise ArithmeticOverflow(msg)
    return value
