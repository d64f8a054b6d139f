# SPDX-License-Identifier: MIT
"""Presentation styles for identifiers.

Formatting only regroups characters. A prefix, when present, is everything
before the first dash and is kept as is; the body is stripped to
alphanumerics and split into runs of ``GROUP_SIZE``.
"""

from __future__ import annotations

import re
from typing import Any, Literal

from .codec import strip_non_alnum

Style = Literal["", "dash", "space"]

GROUP_SIZE = 6
STYLES: tuple[str, ...] = ("", "dash", "space")
_SEPARATORS = {"dash": "-", "space": " "}
_PREFIX_PATTERN = re.compile(r"[A-Za-z0-9]*")


def validate_prefix(prefix: str) -> str:
    """Return ``prefix`` when it is purely alphanumeric.

    Raises:
        ValueError: If ``prefix`` contains any other character.
    """
    if not _PREFIX_PATTERN.fullmatch(prefix):
        raise ValueError(f"Prefix must be alphanumeric, got {prefix!r}")
    return prefix


def _group(body: str, separator: str) -> str:
    return separator.join(
        body[i : i + GROUP_SIZE] for i in range(0, len(body), GROUP_SIZE)
    )


def format_id(identifier: Any, style: str = "") -> str:
    """Return ``identifier`` regrouped according to ``style``.

    Args:
        identifier: Identifier, optionally prefixed and already formatted.
        style: ``""`` for no change, ``"dash"`` or ``"space"``.

    An unprefixed identifier already in ``"dash"`` style is indistinguishable
    from a prefixed one, so its first group is kept as a prefix when it is
    restyled. The result still verifies.

    Returns:
        The reformatted identifier, or ``""`` for empty or non-string input.

    Raises:
        ValueError: If ``style`` is not a known style.
    """
    if style not in STYLES:
        raise ValueError(f"Unknown style {style!r}; expected one of {STYLES}")
    if not identifier or not isinstance(identifier, str):
        return ""
    if not style:
        return identifier
    prefix, dash, body = identifier.partition("-")
    if not dash or not body:
        prefix, body = "", identifier
    grouped = _group(strip_non_alnum(body), _SEPARATORS[style])
    return f"{prefix}-{grouped}" if prefix else grouped


__all__ = ["GROUP_SIZE", "STYLES", "Style", "format_id", "validate_prefix"]
