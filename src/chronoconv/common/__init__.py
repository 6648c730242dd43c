"""Contains classes and functions shared by the conversion modules and the CLI."""

from __future__ import annotations

from datetime import datetime, timezone


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a path-safe UTC time stamp for `dt`, used to name log files.

    Args:
        dt: The date and time to generate a path-safe time stamp from. Defaults to now (UTC).

    Returns:
        A path-safe string representation of `dt`, e.g. ``20210101T083052_000000Z``.
    """
    if dt is None:
        dt = datetime.now(timezone.utc)
    elif dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y%m%dT%H%M%S_%fZ")
