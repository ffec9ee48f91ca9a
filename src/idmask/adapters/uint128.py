# SPDX-License-Identifier: MIT
"""128-bit identifier wrappers over the numeric encoder.

A 128-bit value travels as two unsigned 64-bit numbers, low half first. UUIDs
use their little-endian byte layout (``UUID.bytes_le``), the same bytes .NET
produces for ``Guid.ToByteArray``, so hashids stay interchangeable with
encoders built on that layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import logfire

from ..constants import UINT64_MAX, UINT128_MAX
from ..errors import InvalidHashidError

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from ..core.codec import Hashids


def split_uint128(value: int) -> tuple[int, int]:
    """Return ``(low, high)`` 64-bit halves of ``value``."""

    if value < 0 or value > UINT128_MAX:
        raise ValueError(f"value {value} is outside the unsigned 128-bit range")
    return value & UINT64_MAX, value >> 64


def join_uint128(low: int, high: int) -> int:
    """Return the 128-bit value assembled from ``low`` and ``high`` halves."""

    return (high << 64) | low


def encode_uint128(codec: "Hashids", value: int) -> str:
    """Return the hashid for ``value``, or ``""`` outside ``[0, 2**128)``."""

    try:
        low, high = split_uint128(value)
    except ValueError:
        logfire.debug("Rejected value outside the unsigned 128-bit range")
        return ""
    return codec.encode(low, high)


def decode_uint128(codec: "Hashids", hashid: str) -> int:
    """Return the 128-bit value encoded in ``hashid``.

    Raises:
        InvalidHashidError: If ``hashid`` does not decode to exactly two
            numbers.
    """

    numbers = codec.decode(hashid)
    if len(numbers) != 2:
        raise InvalidHashidError(
            hashid, f"expected two 64-bit halves, decoded {len(numbers)}"
        )
    return join_uint128(*numbers)


def encode_uuid(codec: "Hashids", value: UUID) -> str:
    """Return the hashid for ``value``."""

    return encode_uint128(codec, int.from_bytes(value.bytes_le, "little"))


def decode_uuid(codec: "Hashids", hashid: str) -> UUID:
    """Return the UUID encoded in ``hashid``.

    Raises:
        InvalidHashidError: If ``hashid`` does not decode to exactly two
            numbers.
    """

    value = decode_uint128(codec, hashid)
    return UUID(bytes_le=value.to_bytes(16, "little"))


__all__ = [
    "decode_uint128",
    "decode_uuid",
    "encode_uint128",
    "encode_uuid",
    "join_uint128",
    "split_uint128",
]
