# SPDX-License-Identifier: MIT
"""Runtime configuration for the generator and CLI."""

from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
