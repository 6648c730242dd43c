"""Main Module Documentation.

chronoconv is a deterministic date/time conversion toolkit. The conversions themselves live
in :mod:`chronoconv.time`; the top-level module only provides the command line entry point.
"""

from __future__ import annotations

__version__ = "1.0.0"


def runCommand(cli_args) -> str:
    """Run one parsed :mod:`.cli` sub-command and return its output text.

    Args:
        cli_args (``argparse.Namespace``): parsed command line arguments.

    Raises:
        ParseError: textual input is malformed.
        ArithmeticOverflow: a value leaves the signed 64-bit range.
        InstantRangeError: a result falls outside years 1-9999.

    Returns:
        ``str``: text to print, one result per line.
    """
    # Standard Library Imports
    from datetime import datetime, timezone

    # Local Imports
    from .time.epoch import datetimeToMilliseconds, millisecondsToDatetime
    from .time.iso8601 import formatIso8601, parseIso8601
    from .time.julian import datetimeToJulianDay, julianDayNumber

    if cli_args.command == "format":
        # Local Imports
        from .common.exceptions import ParseError
        from .common.labels import ParseFailure
        from .common.logger import chronoconvLogError

        fields = (
            cli_args.year,
            cli_args.month,
            cli_args.day,
            cli_args.hour,
            cli_args.minute,
            cli_args.second,
        )
        try:
            instant = datetime(*fields, tzinfo=timezone.utc)
        except ValueError as err:
            error = ParseError(fields, ParseFailure.CALENDAR, str(err))
            chronoconvLogError(f"Error: {error}")
            raise error from err
        return formatIso8601(instant)

    if cli_args.command == "parse":
        instant = parseIso8601(cli_args.text)
        return "\n".join(
            (
                formatIso8601(instant),
                f"julian_day={datetimeToJulianDay(instant)}",
                f"milliseconds={datetimeToMilliseconds(instant)}",
            ),
        )

    if cli_args.command == "julian":
        return str(julianDayNumber(cli_args.year, cli_args.month, cli_args.day))

    if cli_args.command == "from-ms":
        return formatIso8601(millisecondsToDatetime(cli_args.milliseconds))

    if cli_args.command == "to-ms":
        return str(datetimeToMilliseconds(parseIso8601(cli_args.text)))

    raise ValueError(f"Unknown command: {cli_args.command!r}")


def main(argv: list[str] | None = None) -> int:
    """chronoconv main entry point.

    This is the function that the :command:`chronoconv` command points to. See :mod:`.cli` for
    details on what command line options are available.

    Args:
        argv (``list``, optional): arguments to parse instead of ``sys.argv[1:]``.

    Returns:
        ``int``: process exit status, 0 on success and 1 when a conversion fails.
    """
    # Standard Library Imports
    import sys

    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.cli import getCommandLineParser
    from .common.exceptions import ArithmeticOverflow, InstantRangeError, ParseError
    from .common.logger import PACKAGE_LOGGER_NAME, Logger

    parser = getCommandLineParser()
    cli_args = parser.parse_args(argv)

    if cli_args.config_file:
        BehavioralConfig(config_file_path=cli_args.config_file)

    logger = Logger(PACKAGE_LOGGER_NAME)
    logger.debug(f"Running {cli_args.command!r} with {vars(cli_args)}")

    try:
        output = runCommand(cli_args)
    except (ParseError, ArithmeticOverflow, InstantRangeError) as err:
        # Conversion functions log the details before raising
        logger.debug(f"{cli_args.command!r} failed: {err}")
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(output)
    return 0
