# SPDX-License-Identifier: MIT
"""Ambient capabilities consumed by the identifier generator.

The generator never reads the wall clock, the host or the system random
source directly. Each is reached through a small provider so tests can swap
in deterministic fakes.
"""

from __future__ import annotations

import secrets
import socket
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Protocol

import psutil

RandomBytes = Callable[[int], bytes]
"""Callable returning ``n`` cryptographically strong random bytes."""

# Used only when psutil reports no flags for an interface.
_LOOPBACK_NAMES = frozenset({"lo", "lo0"})


@dataclass(frozen=True)
class NetworkAdapter:
    """Hardware address of a single network interface."""

    name: str
    mac: str | None
    internal: bool = False


class Clock(Protocol):
    """Source of the current local time."""

    def now(self) -> datetime:
        """Return the current time."""


class HostInfo(Protocol):
    """Source of host identity used for fingerprinting."""

    def hostname(self) -> str:
        """Return the host name, or an empty string when unknown."""

    def adapters(self) -> Iterable[NetworkAdapter]:
        """Yield the network adapters of the host."""


class SystemClock:
    """Clock backed by :func:`datetime.now`."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class SystemHostInfo:
    """Host information read through :mod:`socket` and :mod:`psutil`."""

    def hostname(self) -> str:
        return socket.gethostname() or ""

    def adapters(self) -> Iterable[NetworkAdapter]:
        stats = psutil.net_if_stats()
        for name, addresses in psutil.net_if_addrs().items():
            stat = stats.get(name)
            flags = getattr(stat, "flags", "") if stat is not None else ""
            if flags:
                internal = "loopback" in flags.split(",")
            else:
                internal = name in _LOOPBACK_NAMES
            for address in addresses:
                if address.family == psutil.AF_LINK:
                    yield NetworkAdapter(
                        name=name, mac=address.address, internal=internal
                    )


def system_random_bytes(size: int) -> bytes:
    """Return ``size`` bytes from the operating system CSPRNG."""
    return secrets.token_bytes(size)


__all__ = [
    "Clock",
    "HostInfo",
    "NetworkAdapter",
    "RandomBytes",
    "SystemClock",
    "SystemHostInfo",
    "system_random_bytes",
]
