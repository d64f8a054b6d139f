# SPDX-License-Identifier: MIT
"""Assembly of the unsigned identifier payload."""

from __future__ import annotations

from datetime import datetime

from .codec import encode_base62, to_base36
from .providers import RandomBytes

RANDOM_BYTES = 12


def timestamp_token(now: datetime) -> str:
    """Return the millisecond Unix time of ``now`` in base-36."""
    return to_base36(int(now.timestamp() * 1000))


def compose_payload(
    now: datetime, length: int, fingerprint: str, random_bytes: RandomBytes
) -> str:
    """Return ``random + fingerprint + timestamp`` cut to ``length`` characters.

    The parts are never padded, so the payload is shorter than ``length`` when
    the three parts together run out of characters.

    Args:
        now: Time encoded in the trailing timestamp token.
        length: Scheduled payload length.
        fingerprint: Machine fingerprint token.
        random_bytes: Source of the leading random block.
    """
    random_part = encode_base62(random_bytes(RANDOM_BYTES))
    return f"{random_part}{fingerprint}{timestamp_token(now)}"[:length]


__all__ = ["RANDOM_BYTES", "compose_payload", "timestamp_token"]
