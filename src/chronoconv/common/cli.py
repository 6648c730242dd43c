"""Define the command line interface for the chronoconv conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path

# Local Imports
from .logger import chronoconvLogError


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        chronoconvLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def _addDateArguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("year", metavar="YEAR", type=int, help="Proleptic Gregorian year")
    parser.add_argument("month", metavar="MONTH", type=int, help="Month of the year, 1-12")
    parser.add_argument("day", metavar="DAY", type=int, help="Day of the month, 1-31")


def getCommandLineParser():
    """Create parser for command line arguments.

    Each sub-command stores its name in the ``command`` attribute of the parsed namespace.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="chronoconv Command Line Interface")

    parser.add_argument(
        "-c",
        "--config",
        dest="config_file",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a behavior config file. DEFAULT: packaged default_behavior.config",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    format_cmd = commands.add_parser("format", help="Format a UTC date and time as ISO-8601")
    _addDateArguments(format_cmd)
    for name in ("hour", "minute", "second"):
        format_cmd.add_argument(
            name,
            metavar=name.upper(),
            type=int,
            nargs="?",
            default=0,
            help=f"{name.capitalize()} (UTC). DEFAULT: 0",
        )

    parse_cmd = commands.add_parser(
        "parse",
        help="Parse ISO-8601 text and show its Julian Day Number and epoch milliseconds",
    )
    parse_cmd.add_argument("text", metavar="TEXT", help="Instant as YYYY-MM-DDTHH:MM:SSZ")

    julian_cmd = commands.add_parser("julian", help="Julian Day Number of a calendar date")
    _addDateArguments(julian_cmd)

    from_ms_cmd = commands.add_parser(
        "from-ms",
        help="ISO-8601 instant of a millisecond count since 1970-01-01T00:00:00Z",
    )
    from_ms_cmd.add_argument(
        "milliseconds",
        metavar="MILLISECONDS",
        nargs="?",
        default="",
        help="Signed millisecond count. DEFAULT: 0",
    )

    to_ms_cmd = commands.add_parser(
        "to-ms",
        help="Millisecond count since 1970-01-01T00:00:00Z of an ISO-8601 instant",
    )
    to_ms_cmd.add_argument("text", metavar="TEXT", help="Instant as YYYY-MM-DDTHH:MM:SSZ")

    return parser
