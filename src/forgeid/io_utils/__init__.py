"""File-system helpers for configuration and diagnostic output."""

from .loader import load_app_config

__all__ = ["load_app_config"]
