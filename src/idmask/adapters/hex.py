# SPDX-License-Identifier: MIT
"""Hexadecimal string wrappers over the numeric encoder.

Hex strings are cut into chunks of at most ``HEX_CHUNK_SIZE`` digits. Each
chunk gets a leading ``1`` digit before parsing so leading zeros survive the
trip through an integer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import HEX_CHUNK_SIZE, HEX_DIGITS

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from ..core.codec import Hashids


def is_hex(text: str) -> bool:
    """Return ``True`` when ``text`` is non-empty and only holds hex digits."""

    return bool(text) and all(char in HEX_DIGITS for char in text)


def hex_to_numbers(text: str) -> list[int]:
    """Return the chunk integers for a validated hex string."""

    return [
        int("1" + text[start : start + HEX_CHUNK_SIZE], 16)
        for start in range(0, len(text), HEX_CHUNK_SIZE)
    ]


def numbers_to_hex(numbers: tuple[int, ...]) -> str:
    """Return the uppercase hex string for chunk integers, marker digits removed."""

    return "".join(format(number, "X")[1:] for number in numbers)


def encode_hex(codec: "Hashids", text: str) -> str:
    """Return the hashid for hex string ``text``, or ``""`` if it is not hex."""

    if not is_hex(text):
        return ""
    return codec.encode(hex_to_numbers(text))


def decode_hex(codec: "Hashids", hashid: str) -> str:
    """Return the uppercase hex string encoded in ``hashid``.

    Invalid hashids decode to ``""``.
    """

    return numbers_to_hex(codec.decode(hashid))


__all__ = ["decode_hex", "encode_hex", "hex_to_numbers", "is_hex", "numbers_to_hex"]
