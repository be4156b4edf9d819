"""Runtime configuration defaults for the dataset and debug log."""

from __future__ import annotations

import os
from pathlib import Path

DATA_PATH = str(Path(__file__).with_name("mandys.json"))
DEBUG_LOG_PATH = "/tmp/dressings-debug.log"

_DATA_PATH_ENV = "DRESSINGS_DATA_PATH"
_DEBUG_LOG_PATH_ENV = "DRESSINGS_DEBUG_LOG_PATH"


def resolve_data_path() -> Path:
    """Dataset path, honoring DRESSINGS_DATA_PATH when set."""
    override = os.environ.get(_DATA_PATH_ENV, "").strip()
    return Path(override) if override else Path(DATA_PATH)


def resolve_debug_log_path() -> Path:
    """Debug log path, honoring DRESSINGS_DEBUG_LOG_PATH when set."""
    override = os.environ.get(_DEBUG_LOG_PATH_ENV, "").strip()
    return Path(override) if override else Path(DEBUG_LOG_PATH)
