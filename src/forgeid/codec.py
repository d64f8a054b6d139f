# SPDX-License-Identifier: MIT
"""Text encodings used inside identifiers."""

from __future__ import annotations

import base64
import re

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def to_base36(value: int) -> str:
    """Return ``value`` in lowercase base-36.

    Args:
        value: Non-negative integer to encode.

    Raises:
        ValueError: If ``value`` is negative.
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def strip_non_alnum(text: str) -> str:
    """Return ``text`` without any character outside ``[A-Za-z0-9]``."""
    return _NON_ALNUM.sub("", text)


def encode_base62(data: bytes) -> str:
    """Return the base-64 form of ``data`` with ``+``, ``/`` and ``=`` removed.

    The output is alphanumeric but its length varies with the input bytes.
    """
    return strip_non_alnum(base64.b64encode(data).decode("ascii"))


__all__ = ["encode_base62", "strip_non_alnum", "to_base36"]
