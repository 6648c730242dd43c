"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timezone
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_PATH = Path("config/custom_behavior.config")

# Common instants
TEST_ISO = "2008-05-01T08:30:52Z"
TEST_INSTANT = datetime(2008, 5, 1, 8, 30, 52, tzinfo=timezone.utc)
TEST_MILLISECONDS = 1209630652000
"""``int``: milliseconds since 1970-01-01T00:00:00Z of :data:`.TEST_INSTANT`."""
