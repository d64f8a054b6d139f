# SPDX-License-Identifier: MIT
"""Reporting of recoverable failures."""

from __future__ import annotations

from abc import ABC, abstractmethod

import logfire


class ErrorHandler(ABC):
    """Interface for reporting failures that are recovered from locally.

    Implementations must not raise. Callers continue with a fallback value
    after reporting.
    """

    @abstractmethod
    def handle(self, message: str, exc: Exception | None = None) -> None:
        """Record ``message`` with optional ``exc`` context."""


class LoggingErrorHandler(ErrorHandler):
    """Error handler that emits a ``logfire`` warning."""

    def handle(self, message: str, exc: Exception | None = None) -> None:
        """Log ``message`` and the exception type, if any.

        Args:
            message: Description of the recovered failure.
            exc: Exception that triggered the fallback.
        """
        if exc:
            logfire.warning(
                f"{message}: {exc}", error_type=type(exc).__name__
            )
        else:
            logfire.warning(message)
