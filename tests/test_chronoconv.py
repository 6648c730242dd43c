from __future__ import annotations

# Standard Library Imports
import logging
import os

# Third Party Imports
import pytest

# chronoconv Imports
from chronoconv import main
from chronoconv.common.behavioral_config import BehavioralConfig
from chronoconv.common.logger import PACKAGE_LOGGER_NAME

# Local Imports
from . import CUSTOM_CONFIG_PATH, FIXTURE_DATA_DIR, TEST_ISO, TEST_MILLISECONDS


def runMain(capsys: pytest.CaptureFixture, *args: str) -> tuple[int, str]:
    """Run the CLI entry point and return its exit status and standard output."""
    status = main(list(args))
    return status, capsys.readouterr().out


def testFormat(capsys: pytest.CaptureFixture):
    """Test the `format` command with and without a time of day."""
    assert runMain(capsys, "format", "2008", "5", "1", "8", "30", "52") == (0, f"{TEST_ISO}\n")
    assert runMain(capsys, "format", "7", "1", "2") == (0, "0007-01-02T00:00:00Z\n")


def testFormatInvalidDate(capsys: pytest.CaptureFixture, caplog: pytest.LogCaptureFixture):
    """Test that an impossible date fails with status 1 and an error log record."""
    status, output = runMain(capsys, "format", "2021", "2", "29")
    assert status == 1
    assert output == ""
    assert any(level == logging.ERROR for _, level, _ in caplog.record_tuples)


def testParse(capsys: pytest.CaptureFixture):
    """Test the `parse` command summary."""
    status, output = runMain(capsys, "parse", TEST_ISO)
    assert status == 0
    assert output.splitlines() == [
        TEST_ISO,
        "julian_day=2454588",
        f"milliseconds={TEST_MILLISECONDS}",
    ]


@pytest.mark.parametrize("text", ["2021-13-01T00:00:00Z", "not-a-date", "2021-01-01"])
def testParseMalformed(capsys: pytest.CaptureFixture, text: str):
    """Test that malformed ISO-8601 text fails with status 1."""
    assert runMain(capsys, "parse", text) == (1, "")


def testJulian(capsys: pytest.CaptureFixture):
    """Test the `julian` command."""
    assert runMain(capsys, "julian", "2000", "1", "1") == (0, "2451545\n")
    assert runMain(capsys, "julian", "-4713", "11", "24") == (0, "0\n")


def testMilliseconds(capsys: pytest.CaptureFixture):
    """Test the `from-ms` and `to-ms` commands."""
    assert runMain(capsys, "from-ms", str(TEST_MILLISECONDS)) == (0, f"{TEST_ISO}\n")
    assert runMain(capsys, "from-ms") == (0, "1970-01-01T00:00:00Z\n")
    assert runMain(capsys, "from-ms", "-1000") == (0, "1969-12-31T23:59:59Z\n")
    assert runMain(capsys, "to-ms", TEST_ISO) == (0, f"{TEST_MILLISECONDS}\n")


def testMillisecondFailures(capsys: pytest.CaptureFixture):
    """Test that bad or out of range millisecond counts fail with status 1."""
    assert runMain(capsys, "from-ms", "12ab") == (1, "")
    assert runMain(capsys, "from-ms", "253402300800000") == (1, "")
    assert runMain(capsys, "from-ms", "9223372036854775808") == (1, "")


def testArgumentErrors(capsys: pytest.CaptureFixture):
    """Test that argument errors exit through argparse with status 2."""
    with pytest.raises(SystemExit) as error:
        main(["julian", "2000"])
    assert error.value.code == 2


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testConfigOption(capsys: pytest.CaptureFixture, datafiles):
    """Test that `--config` replaces the shared behavior config."""
    saved_cwd = os.getcwd()
    os.chdir(datafiles)
    try:
        config_file = str(datafiles / CUSTOM_CONFIG_PATH)
        assert runMain(capsys, "--config", config_file, "julian", "2000", "1", "1") == (0, "2451545\n")
        assert BehavioralConfig.getConfig().conversion.CheckInt64Overflow is False
        assert BehavioralConfig.getConfig().logging.OutputLocation == "./logs/"
    finally:
        for handler in list(logging.getLogger(PACKAGE_LOGGER_NAME).handlers):
            logging.getLogger(PACKAGE_LOGGER_NAME).removeHandler(handler)
            handler.close()
        os.chdir(saved_cwd)


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testFailureReportedOnStderr(capsys: pytest.CaptureFixture, datafiles):
    """Test that a failing command prints its error on stderr when logging goes to a file."""
    saved_cwd = os.getcwd()
    os.chdir(datafiles)
    try:
        config_file = str(datafiles / CUSTOM_CONFIG_PATH)
        assert main(["--config", config_file, "parse", "not-a-date"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: ")
        assert "not-a-date" in captured.err
    finally:
        for handler in list(logging.getLogger(PACKAGE_LOGGER_NAME).handlers):
            logging.getLogger(PACKAGE_LOGGER_NAME).removeHandler(handler)
            handler.close()
        os.chdir(saved_cwd)
