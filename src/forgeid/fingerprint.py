# SPDX-License-Identifier: MIT
"""Best-effort machine fingerprint tokens.

The token mixes the host name with the first usable hardware address so that
generators running on different machines diverge even when their random and
time components collide. It carries no security weight. Any failure while
inspecting the host falls back to a random token so generation never stops.
"""

from __future__ import annotations

from typing import Iterable

from .codec import strip_non_alnum, to_base36
from .providers import HostInfo, NetworkAdapter, RandomBytes
from .utils import ErrorHandler, LoggingErrorHandler

FINGERPRINT_SPACE = 1 << 20


def rolling_hash(text: str) -> int:
    """Return the unsigned 32-bit ``h * 31 + ord(ch)`` hash of ``text``."""
    value = 0
    for ch in text:
        value = (value * 31 + ord(ch)) & 0xFFFFFFFF
    return value


def _is_null_mac(mac: str | None) -> bool:
    """Return ``True`` for a missing or all-zero address in any notation."""
    # Windows reports "00-00-00-00-00-00", POSIX "00:00:00:00:00:00".
    return not mac or not strip_non_alnum(mac).strip("0")


def _first_usable_mac(adapters: Iterable[NetworkAdapter]) -> str | None:
    """Return the MAC of the first external adapter with a real address."""
    for adapter in adapters:
        if adapter.internal:
            continue
        if not _is_null_mac(adapter.mac):
            return adapter.mac
    return None


def random_fingerprint(random_bytes: RandomBytes) -> str:
    """Return a uniformly random token in the fingerprint space."""
    # 2**24 is a multiple of 2**20, so the reduction stays uniform.
    value = int.from_bytes(random_bytes(3), "big") % FINGERPRINT_SPACE
    return to_base36(value)


def machine_signature(
    host_info: HostInfo,
    random_bytes: RandomBytes,
    error_handler: ErrorHandler | None = None,
) -> str:
    """Return the fingerprint token for the current host.

    Args:
        host_info: Provider of the host name and network adapters.
        random_bytes: Random source used when introspection fails.
        error_handler: Receiver of introspection failures.

    Returns:
        A base-36 token below ``2**20``.
    """
    try:
        hostname = host_info.hostname() or ""
        mac = _first_usable_mac(host_info.adapters())
        key = f"{hostname}-{mac}" if mac else hostname
        return to_base36(rolling_hash(key) % FINGERPRINT_SPACE)
    except Exception as exc:  # pylint: disable=broad-except
        (error_handler or LoggingErrorHandler()).handle(
            "Host introspection failed; using random fingerprint", exc
        )
        return random_fingerprint(random_bytes)


__all__ = [
    "FINGERPRINT_SPACE",
    "machine_signature",
    "random_fingerprint",
    "rolling_hash",
]
