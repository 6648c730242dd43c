from __future__ import annotations

# Standard Library Imports
import logging
import os

# Third Party Imports
import pytest

# chronoconv Imports
from chronoconv.common import pathSafeTime
from chronoconv.common.logger import (
    PACKAGE_LOGGER_NAME,
    Logger,
    chronoconvLogCritical,
    chronoconvLogDebug,
    chronoconvLogError,
    chronoconvLogInfo,
    chronoconvLogWarning,
)

# Local Imports
from .. import FIXTURE_DATA_DIR, TEST_INSTANT

CORRECT_OUTPUT: list[list[str | int]] = [
    ["test", logging.DEBUG, "This is a debug message."],
    ["test", logging.INFO, "This is an info message."],
    ["test", logging.WARNING, "This is a warning message."],
    ["test", logging.ERROR, "This is an error message."],
    ["test", logging.CRITICAL, "This is a critical message."],
]

CORRECT_FILE_OUTPUT: list[list[str | int]] = [
    ["test_logger", "DEBUG", "This is a debug message.\n"],
    ["test_logger", "INFO", "This is an info message.\n"],
    ["test_logger", "WARNING", "This is a warning message.\n"],
    ["test_logger", "ERROR", "This is an error message.\n"],
    ["test_logger", "CRITICAL", "This is a critical message.\n"],
]


def testStream(caplog: pytest.LogCaptureFixture):
    """Test the logger's output to a console stream."""
    logger = Logger("test", level=logging.DEBUG)
    assert logger.filename == "stderr"
    logger.debug("This is a debug message.")
    logger.info("This is an info message.")
    logger.warning("This is a warning message.")
    logger.error("This is an error message.")
    logger.critical("This is a critical message.")

    records = [record for record in caplog.record_tuples if record[0] == "test"]
    assert records == [tuple(expected) for expected in CORRECT_OUTPUT]


def testStdoutHandler(capsys: pytest.CaptureFixture):
    """Test that ``"stdout"`` attaches a stream handler to standard output."""
    logger = Logger("test-stdout", level=logging.INFO, path="stdout", allow_multiple_handlers=True)
    logger.info("Written to stdout.")
    captured = capsys.readouterr()
    assert "INFO - Written to stdout." in captured.out
    logging.getLogger("test-stdout").handlers.clear()


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testLogfile(datafiles: str):
    """Test the logger's output to a logfile."""
    saved_cwd = os.getcwd()
    os.chdir(datafiles)
    try:
        file_logger = Logger("logfile-test", level=logging.DEBUG, path="logs/")

        file_logger.debug("This is a debug message.")
        file_logger.info("This is an info message.")
        file_logger.warning("This is a warning message.")
        file_logger.error("This is an error message.")
        file_logger.critical("This is a critical message.")

        assert os.path.basename(file_logger.filename).startswith("logfile-test_")
        with open(file_logger.filename, encoding="utf-8") as logfile:
            line_count = 0
            for item, line in enumerate(logfile):
                assert line.split(" - ")[1:] == CORRECT_FILE_OUTPUT[item]
                line_count += 1

            assert line_count == 5
    finally:
        for handler in list(logging.getLogger("logfile-test").handlers):
            logging.getLogger("logfile-test").removeHandler(handler)
            handler.close()
        os.chdir(saved_cwd)


def testPackageHelpers(caplog: pytest.LogCaptureFixture):
    """Test the one-liner helpers write to the package logger at the right level."""
    caplog.set_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME)
    chronoconvLogDebug("debug")
    chronoconvLogInfo("info")
    chronoconvLogWarning("warning")
    chronoconvLogError("error")
    chronoconvLogCritical("critical")

    assert caplog.record_tuples == [
        (PACKAGE_LOGGER_NAME, logging.DEBUG, "debug"),
        (PACKAGE_LOGGER_NAME, logging.INFO, "info"),
        (PACKAGE_LOGGER_NAME, logging.WARNING, "warning"),
        (PACKAGE_LOGGER_NAME, logging.ERROR, "error"),
        (PACKAGE_LOGGER_NAME, logging.CRITICAL, "critical"),
    ]


def testPathSafeTime():
    """Test that log file time stamps hold no path separators or colons."""
    assert pathSafeTime(TEST_INSTANT) == "20080501T083052_000000Z"
    stamp = pathSafeTime()
    assert ":" not in stamp
    assert os.sep not in stamp
