# SPDX-License-Identifier: MIT
"""Keyed signatures appended to identifier payloads.

An identifier is valid when its last ``SIGNATURE_LENGTH`` characters equal the
truncated HMAC-SHA256 of everything before them. Verification only needs the
shared secret; no lookup store is involved.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Iterator

from .codec import strip_non_alnum

SIGNATURE_LENGTH = 10


def sign(payload: str, secret: bytes) -> str:
    """Return the lowercase 10 character hex signature of ``payload``."""
    digest = hmac.new(secret, payload.encode("utf-8"), hashlib.sha256).hexdigest()
    return digest[:SIGNATURE_LENGTH].lower()


def _candidate_bodies(candidate: str) -> Iterator[str]:
    """Yield the possible ``payload + signature`` readings of ``candidate``.

    Text after the first dash is tried first as that is where a prefix ends.
    Dash-grouped identifiers without a prefix also contain dashes, so the
    whole string is always tried as well.
    """
    _, dash, rest = candidate.partition("-")
    if dash:
        yield strip_non_alnum(rest)
    yield strip_non_alnum(candidate)


def _matches(body: str, secret: bytes) -> bool:
    if len(body) <= SIGNATURE_LENGTH:
        return False
    content = body[:-SIGNATURE_LENGTH]
    given = body[-SIGNATURE_LENGTH:].lower()
    return hmac.compare_digest(sign(content, secret), given)


def verify(candidate: Any, secret: bytes) -> bool:
    """Return ``True`` when ``candidate`` carries a valid signature.

    Prefixes, dashes and spaces added by formatting are ignored. Malformed
    input of any kind yields ``False``; this function never raises.

    Args:
        candidate: Identifier to check, in any presentation style.
        secret: Shared signing key.
    """
    if not candidate or not isinstance(candidate, str):
        return False
    return any(_matches(body, secret) for body in _candidate_bodies(candidate))


__all__ = ["SIGNATURE_LENGTH", "sign", "verify"]
