"""Project-wide constants and defaults.

This module centralises small constants that are imported across the
application. Keep this file minimal and free of side effects.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_SECRET = "forgeid-secret"
DEFAULT_EPOCH_YEAR = 1970
DEFAULT_BASE_LENGTH = 10
DEFAULT_GROWTH_INTERVAL_YEARS = 10

DEFAULT_CONFIG_DIR = Path("config")
DEFAULT_CONFIG_FILE = Path("app.yaml")

ENV_PREFIX = "FORGEID_"

__all__ = [
    "DEFAULT_BASE_LENGTH",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_EPOCH_YEAR",
    "DEFAULT_GROWTH_INTERVAL_YEARS",
    "DEFAULT_SECRET",
    "ENV_PREFIX",
]
