"""Contains the conversion functions between calendar instants, Julian Day Numbers and epoch ticks.

Each module is independent of the others apart from the shared constants and integer helpers:

* :mod:`.iso8601` encodes and decodes the fixed ``YYYY-MM-DDTHH:MM:SSZ`` pattern.
* :mod:`.julian` converts proleptic Gregorian dates to Julian Day Numbers.
* :mod:`.epoch` converts between instants, 100 ns ticks and millisecond counts.

Instants are :class:`datetime.datetime` objects constrained to UTC, see :func:`.utcInstant`.
"""
