# SPDX-License-Identifier: MIT
"""Positional base-N conversion between integers and alphabet characters."""

from __future__ import annotations

from ..errors import InvalidHashidError


def encode_digits(number: int, alphabet: str) -> str:
    """Return ``number`` written in base ``len(alphabet)``.

    The most significant digit comes first and zero encodes as ``alphabet[0]``.
    """

    base = len(alphabet)
    digits: list[str] = []
    while True:
        number, remainder = divmod(number, base)
        digits.append(alphabet[remainder])
        if number == 0:
            break
    return "".join(reversed(digits))


def decode_digits(digits: str, alphabet: str) -> int:
    """Return the integer spelled by ``digits`` in base ``len(alphabet)``.

    Raises:
        InvalidHashidError: If a character is not part of ``alphabet``.
    """

    base = len(alphabet)
    number = 0
    for char in digits:
        position = alphabet.find(char)
        if position < 0:
            raise InvalidHashidError(digits, f"character {char!r} outside alphabet")
        number = number * base + position
    return number


__all__ = ["decode_digits", "encode_digits"]
