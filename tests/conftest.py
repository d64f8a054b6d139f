# SPDX-License-Identifier: MIT
"""Test configuration for forgeid.

Provides deterministic clock, host and random providers and keeps Logfire
local and silent.
"""

from __future__ import annotations

import hashlib
import os
from datetime import datetime, timezone
from typing import Iterable

import logfire
import pytest

from forgeid import ForgeIdGenerator
from forgeid.providers import NetworkAdapter

logfire.configure(send_to_logfire=False, console=False)

FIXED_NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


class FixedClock:
    """Clock frozen at ``moment``."""

    def __init__(self, moment: datetime = FIXED_NOW) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class FakeHostInfo:
    """Host with a fixed name and adapter list."""

    def __init__(
        self, name: str = "build-01", adapters: Iterable[NetworkAdapter] = ()
    ) -> None:
        self.name = name
        self._adapters = list(adapters)

    def hostname(self) -> str:
        return self.name

    def adapters(self) -> Iterable[NetworkAdapter]:
        return iter(self._adapters)


class BrokenHostInfo:
    """Host whose introspection always fails."""

    def hostname(self) -> str:
        raise PermissionError("hostname unavailable")

    def adapters(self) -> Iterable[NetworkAdapter]:
        raise PermissionError("adapters unavailable")


class CountingRandom:
    """Deterministic byte stream derived from a counter."""

    def __init__(self, seed: int = 0) -> None:
        self.counter = seed
        self.calls: list[int] = []

    def __call__(self, size: int) -> bytes:
        self.calls.append(size)
        self.counter += 1
        digest = hashlib.sha256(str(self.counter).encode("ascii")).digest()
        return (digest * (size // len(digest) + 1))[:size]


class RecordingErrorHandler:
    """Error handler that records reported failures."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, Exception | None]] = []

    def handle(self, message: str, exc: Exception | None = None) -> None:
        self.messages.append((message, exc))


ETH0 = NetworkAdapter(name="eth0", mac="02:42:ac:11:00:02")
LOOPBACK = NetworkAdapter(name="lo", mac="00:00:00:00:00:00", internal=True)


@pytest.fixture()
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def host_info() -> FakeHostInfo:
    return FakeHostInfo(adapters=[LOOPBACK, ETH0])


@pytest.fixture()
def counting_random() -> CountingRandom:
    return CountingRandom()


@pytest.fixture()
def generator(
    fixed_clock: FixedClock, host_info: FakeHostInfo, counting_random: CountingRandom
) -> ForgeIdGenerator:
    """Generator with every ambient capability replaced by a fake."""
    return ForgeIdGenerator(
        "unit-test-secret",
        clock=fixed_clock,
        host_info=host_info,
        random_bytes=counting_random,
    )


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Run each test without FORGEID_* variables inside an empty directory."""
    for name in list(os.environ):
        if name.startswith("FORGEID_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
