# SPDX-License-Identifier: MIT
"""Pydantic models describing generator configuration and diagnostic output.

These definitions are the contract between the configuration layer, the
generator and the command-line interface. Configuration models are strict so
that misspelt keys in a YAML file fail loudly instead of being ignored.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, SecretBytes, field_validator

from .constants import (
    DEFAULT_BASE_LENGTH,
    DEFAULT_EPOCH_YEAR,
    DEFAULT_GROWTH_INTERVAL_YEARS,
    DEFAULT_SECRET,
)
from .formatting import Style


class StrictModel(BaseModel):
    """Base model with strict settings to prevent shape drift."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=False)


class GeneratorConfig(StrictModel):
    """Immutable parameters owned by a single generator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    secret: SecretBytes = Field(
        SecretBytes(DEFAULT_SECRET.encode("utf-8")),
        description="Shared HMAC key used to sign and verify identifiers.",
    )
    epoch_year: int = Field(
        DEFAULT_EPOCH_YEAR, description="Year at which payloads have base length."
    )
    base_length: int = Field(
        DEFAULT_BASE_LENGTH, ge=1, description="Payload length at the epoch."
    )
    growth_interval_years: int = Field(
        DEFAULT_GROWTH_INTERVAL_YEARS,
        ge=1,
        description="Years between one-character payload length increments.",
    )

    @field_validator("secret", mode="before")
    @classmethod
    def _encode_secret(cls, value: object) -> object:
        """Accept text secrets by encoding them as UTF-8."""
        if isinstance(value, str):
            return value.encode("utf-8")
        return value

    @field_validator("secret")
    @classmethod
    def _secret_not_empty(cls, value: SecretBytes) -> SecretBytes:
        if not value.get_secret_value():
            raise ValueError("secret must not be empty")
        return value

    @property
    def key(self) -> bytes:
        """Return the raw signing key."""
        return self.secret.get_secret_value()


class AppConfig(StrictModel):
    """File-based application configuration, usually ``config/app.yaml``."""

    epoch_year: int = Field(
        DEFAULT_EPOCH_YEAR, description="Year at which payloads have base length."
    )
    base_length: int = Field(
        DEFAULT_BASE_LENGTH, ge=1, description="Payload length at the epoch."
    )
    growth_interval_years: int = Field(
        DEFAULT_GROWTH_INTERVAL_YEARS,
        ge=1,
        description="Years between payload length increments.",
    )
    default_prefix: str = Field(
        "", pattern=r"^[A-Za-z0-9]*$", description="Prefix applied by the CLI."
    )
    default_style: Style = Field("", description="Presentation style for the CLI.")
    log_level: Annotated[
        str, Field(min_length=1, description="Logging verbosity level.")
    ] = "warn"


class StressReport(BaseModel):
    """Outcome of a stress test run."""

    total: int = Field(..., ge=0, description="Identifiers generated.")
    unique: int = Field(..., ge=0, description="Distinct identifiers seen.")
    duplicates: int = Field(..., ge=0, description="Repeated identifiers.")
    invalid: int = Field(..., ge=0, description="Identifiers failing verify.")
    seconds: float = Field(..., ge=0, description="Wall time of the run.")

    @property
    def per_second(self) -> float:
        """Return the generation throughput."""
        return self.total / self.seconds if self.seconds else 0.0


class BenchmarkPoint(BaseModel):
    """Measurement captured at a benchmark checkpoint."""

    keys: int = Field(..., ge=0, description="Identifiers generated so far.")
    seconds: float = Field(..., ge=0, description="Elapsed wall time.")
    ram_mb: float = Field(..., ge=0, description="Resident memory in MiB.")


__all__ = [
    "AppConfig",
    "BenchmarkPoint",
    "GeneratorConfig",
    "StrictModel",
    "StressReport",
]
