# SPDX-License-Identifier: MIT
"""Exception hierarchy raised by :mod:`idmask`.

Recoverable input problems on the numeric contract (negative numbers, empty
input, tampered hashids) are reported through empty results rather than
exceptions. The classes below cover the cases that must stay loud.
"""

from __future__ import annotations


class IdmaskError(Exception):
    """Base class for all library errors."""


class ConfigurationError(IdmaskError, ValueError):
    """Raised when an encoder cannot be built from the supplied settings."""


class InvalidHashidError(IdmaskError, ValueError):
    """Raised when a hashid is not a valid encoding for the configuration."""

    def __init__(self, hashid: str, reason: str = "not a valid hashid") -> None:
        self.hashid = hashid
        self.reason = reason
        super().__init__(f"{hashid!r}: {reason}")


class DecodeOverflowError(IdmaskError, OverflowError):
    """Raised when a decoded number does not fit the requested integer width."""

    def __init__(self, value: int, bits: int) -> None:
        self.value = value
        self.bits = bits
        super().__init__(
            f"Decoded value {value} does not fit a signed {bits}-bit integer"
        )


__all__ = [
    "ConfigurationError",
    "DecodeOverflowError",
    "IdmaskError",
    "InvalidHashidError",
]
