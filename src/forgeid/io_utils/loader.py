# SPDX-License-Identifier: MIT
"""Loading of the YAML application configuration.

The configuration file is optional: a missing file yields the defaults from
:class:`~forgeid.models.AppConfig`. A file that exists but cannot be read or
validated raises ``RuntimeError`` so misconfiguration is caught early.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

import logfire
import yaml
from pydantic import TypeAdapter, ValidationError

from ..constants import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE
from ..models import AppConfig
from ..utils import ErrorHandler, LoggingErrorHandler

T = TypeVar("T")


def _read_file(path: Path, error_handler: ErrorHandler) -> str:
    """Return the text content of ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as exc:
        error_handler.handle(f"Error reading file {path}", exc)
        raise RuntimeError(f"An error occurred while reading {path}: {exc}") from exc


def _read_yaml_file(
    path: Path,
    schema: type[T],
    error_handler: ErrorHandler | None = None,
) -> T:
    """Return YAML data loaded from ``path`` validated against ``schema``."""
    handler = error_handler or LoggingErrorHandler()
    with logfire.span("fs.read_yaml", attributes={"path": str(path)}):
        try:
            adapter = TypeAdapter(schema)
            data = yaml.safe_load(_read_file(path, handler)) or {}
            return adapter.validate_python(data)
        except FileNotFoundError:
            raise
        except (RuntimeError, ValidationError, yaml.YAMLError, ValueError) as exc:
            handler.handle(f"Error reading YAML file {path}", exc)
            raise RuntimeError(
                f"An error occurred while reading the YAML file: {exc}"
            ) from exc


def load_app_config(
    base_dir: Path | str = DEFAULT_CONFIG_DIR,
    filename: Path | str = DEFAULT_CONFIG_FILE,
) -> AppConfig:
    """Return application configuration from ``base_dir``.

    Args:
        base_dir: Directory holding the configuration file.
        filename: Name of the YAML file inside ``base_dir``.

    Returns:
        Validated configuration; defaults when the file is absent.

    Raises:
        RuntimeError: If the file exists but is unreadable or invalid.
    """
    path = Path(base_dir) / Path(filename)
    try:
        return _read_yaml_file(path, AppConfig)
    except FileNotFoundError:
        logfire.debug("No configuration file found; using defaults", path=str(path))
        return AppConfig()


__all__ = ["load_app_config"]
