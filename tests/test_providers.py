# SPDX-License-Identifier: MIT
"""Tests for the psutil-backed host provider."""

from __future__ import annotations

import socket
from types import SimpleNamespace

import psutil
import pytest

from conftest import CountingRandom
from forgeid.codec import to_base36
from forgeid.fingerprint import (
    FINGERPRINT_SPACE,
    _first_usable_mac,
    machine_signature,
    rolling_hash,
)
from forgeid.providers import NetworkAdapter, SystemHostInfo


def _link(address: str) -> SimpleNamespace:
    return SimpleNamespace(family=psutil.AF_LINK, address=address)


def _inet(address: str) -> SimpleNamespace:
    return SimpleNamespace(family=socket.AF_INET, address=address)


def _stats(flags: str) -> SimpleNamespace:
    return SimpleNamespace(isup=True, flags=flags)


@pytest.fixture
def fake_interfaces(monkeypatch):
    """Install ``addrs`` and ``stats`` as the psutil interface tables."""

    def install(addrs: dict, stats: dict) -> None:
        monkeypatch.setattr(psutil, "net_if_addrs", lambda: addrs)
        monkeypatch.setattr(psutil, "net_if_stats", lambda: stats)

    return install


def test_loopback_flag_marks_internal(fake_interfaces) -> None:
    fake_interfaces(
        {
            "lo": [_link("00:00:00:00:00:00")],
            "eth0": [_link("02:42:ac:11:00:02")],
        },
        {"lo": _stats("up,loopback,running"), "eth0": _stats("up,broadcast")},
    )
    assert list(SystemHostInfo().adapters()) == [
        NetworkAdapter(name="lo", mac="00:00:00:00:00:00", internal=True),
        NetworkAdapter(name="eth0", mac="02:42:ac:11:00:02", internal=False),
    ]


def test_only_link_layer_addresses_are_reported(fake_interfaces) -> None:
    fake_interfaces(
        {"eth0": [_inet("10.0.0.5"), _link("02:42:ac:11:00:02")]},
        {"eth0": _stats("up,broadcast")},
    )
    adapters = list(SystemHostInfo().adapters())
    assert [adapter.mac for adapter in adapters] == ["02:42:ac:11:00:02"]


def test_lo_prefixed_name_is_not_loopback_when_flagged_otherwise(
    fake_interfaces,
) -> None:
    fake_interfaces(
        {"lowpan0": [_link("aa:bb:cc:dd:ee:01")]},
        {"lowpan0": _stats("up,running")},
    )
    (adapter,) = SystemHostInfo().adapters()
    assert adapter.internal is False


@pytest.mark.parametrize(
    ("name", "internal"),
    [("lo", True), ("lo0", True), ("lowpan0", False), ("eth0", False)],
)
def test_missing_stats_fall_back_to_exact_names(
    fake_interfaces, name: str, internal: bool
) -> None:
    fake_interfaces({name: [_link("aa:bb:cc:dd:ee:02")]}, {})
    (adapter,) = SystemHostInfo().adapters()
    assert adapter.internal is internal


def test_dash_notation_zero_address_is_skipped(fake_interfaces) -> None:
    fake_interfaces(
        {
            "Ethernet": [_link("00-00-00-00-00-00")],
            "Wi-Fi": [_link("AA-BB-CC-DD-EE-FF")],
        },
        {"Ethernet": _stats(""), "Wi-Fi": _stats("")},
    )
    assert _first_usable_mac(SystemHostInfo().adapters()) == "AA-BB-CC-DD-EE-FF"


def test_system_host_feeds_machine_signature(fake_interfaces, monkeypatch) -> None:
    fake_interfaces(
        {
            "lo": [_link("00:00:00:00:00:00")],
            "eth0": [_link("02:42:ac:11:00:02")],
        },
        {"lo": _stats("up,loopback"), "eth0": _stats("up,broadcast")},
    )
    monkeypatch.setattr(socket, "gethostname", lambda: "build-01")
    random = CountingRandom()
    token = machine_signature(SystemHostInfo(), random)
    expected = rolling_hash("build-01-02:42:ac:11:00:02") % FINGERPRINT_SPACE
    assert token == to_base36(expected)
    assert random.calls == []
