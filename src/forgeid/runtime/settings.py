# SPDX-License-Identifier: MIT
"""Centralised application configuration management.

This module exposes :class:`Settings`, a ``pydantic-settings`` model that
combines values sourced from a YAML configuration file, a ``.env`` file and
environment variables. Environment variables take precedence over file-based
values and the merged configuration is validated before use.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from ..constants import (
    DEFAULT_BASE_LENGTH,
    DEFAULT_EPOCH_YEAR,
    DEFAULT_GROWTH_INTERVAL_YEARS,
    DEFAULT_SECRET,
    ENV_PREFIX,
)
from ..io_utils.loader import load_app_config


class Settings(BaseSettings):
    """Application settings combining file-based and environment configuration."""

    secret: SecretStr = Field(
        SecretStr(DEFAULT_SECRET),
        description="Shared HMAC key used to sign identifiers.",
        repr=False,
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
    default_prefix: str = Field(
        "", pattern=r"^[A-Za-z0-9]*$", description="Prefix applied by the CLI."
    )
    default_style: Literal["", "dash", "space"] = Field(
        "", description="Presentation style applied by the CLI."
    )
    log_level: str = Field("warn", description="Logging verbosity level.")
    logfire_token: str | None = Field(
        None, description="Logfire authentication token, if available.", repr=False
    )

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    @field_validator("secret")
    @classmethod
    def _secret_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("secret must not be empty")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # File values arrive as init kwargs and must lose to the environment.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load and validate application settings.

    Configuration values are read from the YAML configuration file and then
    merged with environment variables using ``pydantic-settings``. When a
    value is provided in both sources the environment variable wins. A
    ``.env`` file in the working directory is loaded automatically when
    present. The optional ``config_path`` parameter overrides the default
    ``config/app.yaml`` location.

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Settings: Fully validated application configuration.

    Raises:
        RuntimeError: If configuration values are invalid or the file cannot
            be read.
    """
    if config_path:
        cfg_path = Path(config_path)
        config = load_app_config(cfg_path.parent, cfg_path.name)
    else:
        config = load_app_config()
    env_file_path = Path(".env")
    env_file = env_file_path if env_file_path.exists() else None
    try:
        return Settings(
            **config.model_dump(),
            _env_file=env_file,  # type: ignore[call-arg]
        )
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc


__all__ = ["Settings", "load_settings"]
