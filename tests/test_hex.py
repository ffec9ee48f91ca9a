# SPDX-License-Identifier: MIT
"""Tests for the hexadecimal adapter."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from idmask import Hashids
from idmask.adapters.hex import hex_to_numbers, is_hex, numbers_to_hex


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("deadBEEF", True),
        ("0", True),
        ("", False),
        ("0x1f", False),
        ("12 34", False),
        ("ghij", False),
        ("٠", False),
    ],
)
def test_is_hex(text: str, expected: bool) -> None:
    assert is_hex(text) is expected


def test_chunks_carry_marker_digit() -> None:
    assert hex_to_numbers("0F") == [0x10F]
    assert hex_to_numbers("0" * 13) == [0x1000000000000, 0x10]


def test_numbers_to_hex_strips_marker() -> None:
    assert numbers_to_hex((0x10F, 0x1ABC)) == "0FABC"
    assert numbers_to_hex(()) == ""


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("FA", "lzY"),
        ("26dd", "MemE"),
        ("507f1f77bcf86cd799439011", "x56QL5Dr4Efom6oN6vWO"),
    ],
)
def test_reference_vectors(salted: Hashids, text: str, expected: str) -> None:
    assert salted.encode_hex(text) == expected
    assert salted.decode_hex(expected) == text.upper()


def test_encode_hex_rejects_non_hex(codec: Hashids) -> None:
    assert codec.encode_hex("") == ""
    assert codec.encode_hex("xyz") == ""


def test_decode_hex_invalid_hashid(codec: Hashids) -> None:
    assert codec.decode_hex("") == ""
    assert codec.decode_hex("!!!") == ""


def test_leading_zeros_survive(codec: Hashids) -> None:
    assert codec.decode_hex(codec.encode_hex("000000000000000F")) == "000000000000000F"


@given(text=st.text(alphabet="0123456789abcdefABCDEF", min_size=1, max_size=60))
def test_hex_round_trip(text: str) -> None:
    codec = Hashids(salt="hex")
    assert codec.decode_hex(codec.encode_hex(text)) == text.upper()
