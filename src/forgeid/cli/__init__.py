"""Command-line entry point for :mod:`forgeid`."""

from .main import main

__all__ = ["main"]
