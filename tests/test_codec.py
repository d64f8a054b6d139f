# SPDX-License-Identifier: MIT
"""Tests for identifier text encodings."""

import pytest

from forgeid.codec import encode_base62, strip_non_alnum, to_base36


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, "0"), (9, "9"), (35, "z"), (36, "10"), (1_048_575, "mh33")],
)
def test_to_base36(value: int, expected: str) -> None:
    assert to_base36(value) == expected


def test_to_base36_matches_int_parsing() -> None:
    value = 1_792_411_200_000
    assert int(to_base36(value), 36) == value


def test_to_base36_rejects_negative() -> None:
    with pytest.raises(ValueError):
        to_base36(-1)


def test_strip_non_alnum() -> None:
    assert strip_non_alnum("TRX-ab c/d+e=") == "TRXabcde"


def test_encode_base62_strips_symbols() -> None:
    # b"\xfb\xff" encodes to "+/8=" in base-64.
    assert encode_base62(b"\xfb\xff") == "8"
    assert encode_base62(b"hello world!") == "aGVsbG8gd29ybGQh"
