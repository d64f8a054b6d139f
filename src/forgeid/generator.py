# SPDX-License-Identifier: MIT
"""Self-verifying identifier generator.

:class:`ForgeIdGenerator` ties together the length schedule, the machine
fingerprint, payload composition, signing and presentation. Each instance owns
an immutable :class:`~forgeid.models.GeneratorConfig`; the clock, host and
random capabilities are injected so callers and tests can replace them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import logfire

from . import signing
from .constants import (
    DEFAULT_BASE_LENGTH,
    DEFAULT_EPOCH_YEAR,
    DEFAULT_GROWTH_INTERVAL_YEARS,
    DEFAULT_SECRET,
)
from .fingerprint import machine_signature
from .formatting import format_id, validate_prefix
from .models import GeneratorConfig
from .payload import compose_payload
from .providers import (
    Clock,
    HostInfo,
    RandomBytes,
    SystemClock,
    SystemHostInfo,
    system_random_bytes,
)
from .scheduler import scheduled_length
from .utils import ErrorHandler, LoggingErrorHandler

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from .runtime.settings import Settings


class ForgeIdGenerator:
    """Generate, verify and format signed identifiers."""

    def __init__(
        self,
        secret: bytes | str = DEFAULT_SECRET,
        epoch_year: int = DEFAULT_EPOCH_YEAR,
        base_length: int = DEFAULT_BASE_LENGTH,
        growth_interval_years: int = DEFAULT_GROWTH_INTERVAL_YEARS,
        *,
        clock: Clock | None = None,
        host_info: HostInfo | None = None,
        random_bytes: RandomBytes | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        """Create a generator.

        Args:
            secret: Shared signing key; text is encoded as UTF-8.
            epoch_year: Year at which payloads carry ``base_length`` characters.
            base_length: Payload length at the epoch.
            growth_interval_years: Years per additional payload character.
            clock: Time source, defaults to the system clock.
            host_info: Host identity source used for fingerprints.
            random_bytes: Random byte source, defaults to :mod:`secrets`.
            error_handler: Receiver of recovered introspection failures.

        Raises:
            pydantic.ValidationError: If the configuration is invalid.
        """
        self._config = GeneratorConfig(
            secret=secret,
            epoch_year=epoch_year,
            base_length=base_length,
            growth_interval_years=growth_interval_years,
        )
        self._clock: Clock = clock or SystemClock()
        self._host_info: HostInfo = host_info or SystemHostInfo()
        self._random_bytes: RandomBytes = random_bytes or system_random_bytes
        self._error_handler: ErrorHandler = error_handler or LoggingErrorHandler()
        logfire.debug(
            "ForgeIdGenerator created",
            epoch_year=epoch_year,
            base_length=base_length,
            growth_interval_years=growth_interval_years,
        )

    @classmethod
    def from_settings(
        cls, settings: "Settings", **capabilities: Any
    ) -> "ForgeIdGenerator":
        """Return a generator configured from validated ``settings``."""
        return cls(
            secret=settings.secret.get_secret_value(),
            epoch_year=settings.epoch_year,
            base_length=settings.base_length,
            growth_interval_years=settings.growth_interval_years,
            **capabilities,
        )

    @property
    def config(self) -> GeneratorConfig:
        """Return the immutable generator configuration."""
        return self._config

    def scheduled_length(self) -> int:
        """Return the payload length for the current year."""
        return scheduled_length(
            self._clock.now(),
            self._config.epoch_year,
            self._config.base_length,
            self._config.growth_interval_years,
        )

    def machine_signature(self) -> str:
        """Return the fingerprint token of the current host."""
        return machine_signature(
            self._host_info, self._random_bytes, self._error_handler
        )

    def compose_payload(self) -> str:
        """Return a fresh unsigned payload."""
        now = self._clock.now()
        length = scheduled_length(
            now,
            self._config.epoch_year,
            self._config.base_length,
            self._config.growth_interval_years,
        )
        return compose_payload(
            now, length, self.machine_signature(), self._random_bytes
        )

    def sign(self, payload: str) -> str:
        """Return the signature of ``payload`` under this generator's key."""
        return signing.sign(payload, self._config.key)

    def generate(self, prefix: str = "", style: str = "") -> str:
        """Return a new signed identifier.

        Args:
            prefix: Optional alphanumeric label placed before the first dash.
            style: Presentation style, ``""``, ``"dash"`` or ``"space"``.

        Raises:
            ValueError: If ``prefix`` is not alphanumeric or ``style`` is unknown.
        """
        validate_prefix(prefix)
        payload = self.compose_payload()
        body = payload + self.sign(payload)
        return format_id(f"{prefix}-{body}" if prefix else body, style)

    def verify(self, candidate: Any) -> bool:
        """Return ``True`` when ``candidate`` was signed with this key."""
        return signing.verify(candidate, self._config.key)

    def format(self, identifier: Any, style: str = "") -> str:
        """Return ``identifier`` regrouped in ``style``."""
        return format_id(identifier, style)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self._config!r})"


__all__ = ["ForgeIdGenerator"]
