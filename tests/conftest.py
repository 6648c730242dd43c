from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# chronoconv Imports
from chronoconv.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from chronoconv.common.logger import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete the behavior config environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        BehavioralConfig.resetConfig()
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig.resetConfig()


@pytest.fixture(autouse=True)
def _resetPackageLogger() -> None:
    """Remove handlers that a test attached to the package logger, they hold stale streams."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture(name="no_overflow_check")
def _disableOverflowCheck() -> None:
    """Turn off signed 64-bit range enforcement for a single test."""
    BehavioralConfig.getConfig().conversion.CheckInt64Overflow = False
    yield
    BehavioralConfig.getConfig().conversion.CheckInt64Overflow = True


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger
