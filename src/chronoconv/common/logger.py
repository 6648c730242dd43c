"""Defines the :class:`.Logger` class and the package-level logging helpers."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "chronoconv"
"""``str``: name of the top-level logger that the one-liner helpers write to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"


class Logger:
    """Extended logger wraps the standard Python logging package.

    It also creates a standard file name and log format for any log files that are saved.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``string``): Name of the the logger instance
            level (``logging.LOG_LEVEL``): Determines what level of log messages are published
            path (``string``): Path to where the log file will be stored, or ``"stdout"``/``"stderr"``
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig().logging
        if level is None:
            level = config.Level
        if not path:
            path = config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if not self.logger.handlers or allow_multiple_handlers is True:
            if path in ("stdout", "stderr"):
                self.filename = path
                handler = logging.StreamHandler(getattr(sys, path))

            else:
                if not exists(path):
                    self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                    makedirs(path)

                self.filename = join(path, f"{name}_{pathSafeTime()}.log")
                handler = RotatingFileHandler(
                    self.filename,
                    maxBytes=config.MaxFileSize,
                    backupCount=config.MaxFileCount,
                )

            handler.setFormatter(logging.Formatter(LOG_FORMAT))

            self.logger.setLevel(level)
            self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Delegate everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _chronoconvLog(message: str, level: int):
    """Log a message to the top-level log record.

    This provides a simple, easy one-liner that doesn't require pre-initializing a logger object.
    The conversion functions use it to record a failure right before raising.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(PACKAGE_LOGGER_NAME).log(msg=message, level=level)


def chronoconvLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _chronoconvLog(message, level=logging.CRITICAL)


def chronoconvLogError(message: str):
    """Log an ERROR message to the top-level log record.

    See Also:
        :func:`._chronoconvLog`
    """
    _chronoconvLog(message, level=logging.ERROR)


def chronoconvLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _chronoconvLog(message, level=logging.WARNING)


def chronoconvLogInfo(message: str):
    """Log an INFO message to the top-level log record."""
    _chronoconvLog(message, level=logging.INFO)


def chronoconvLogDebug(message: str):
    """Log a DEBUG message to the top-level log record."""
    _chronoconvLog(message, level=logging.DEBUG)
