# SPDX-License-Identifier: MIT
"""Hashid assembly and disassembly.

:class:`Hashids` turns sequences of unsigned 64-bit integers into short
salt-keyed strings and back. An instance is configured once and then shared
freely: encode and decode only read the partitioned alphabet and build their
working copies locally, so concurrent calls need no locking.

The scheme is obfuscation, not encryption. Decoding re-encodes the recovered
numbers and only accepts the input when it matches exactly, which rejects
tampered strings and strings produced under another configuration.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING
from uuid import UUID

import logfire

from ..adapters import hex as hex_adapter
from ..adapters import uint128 as uint128_adapter
from ..constants import (
    DEFAULT_ALPHABET,
    DEFAULT_SEPARATORS,
    FINGERPRINT_OFFSET,
    INT32_MAX,
    INT64_MAX,
    UINT64_MAX,
)
from ..errors import DecodeOverflowError, InvalidHashidError
from ..models import HashidsConfig, build_config
from ..utils.text import is_blank
from .alphabet import partition_alphabet
from .digits import decode_digits, encode_digits
from .shuffle import consistent_shuffle

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from ..runtime.settings import Settings


def _coerce_numbers(numbers: tuple[object, ...]) -> tuple[int, ...]:
    """Return ``numbers`` as plain ints, unpacking a single iterable argument.

    Raises:
        TypeError: If a value is not an integer. ``bool`` is refused.
    """

    if len(numbers) == 1 and isinstance(numbers[0], Iterable):
        if isinstance(numbers[0], (str, bytes)):
            raise TypeError("numbers must be integers, not strings")
        numbers = tuple(numbers[0])
    values = []
    for number in numbers:
        if isinstance(number, bool):
            raise TypeError("numbers must be integers, not bool")
        values.append(operator.index(number))  # type: ignore[call-overload]
    return tuple(values)


def _find_any(text: str, chars: frozenset[str], start: int = 0) -> int:
    """Return the index of the first character of ``text`` in ``chars``."""

    for index in range(start, len(text)):
        if text[index] in chars:
            return index
    return -1


class Hashids:
    """Salt-keyed reversible encoder for non-negative integers.

    Args:
        salt: Key driving every shuffle. Different salts give unrelated
            hashids for the same numbers.
        min_length: Minimum length of generated hashids; ``0`` disables
            padding.
        alphabet: Characters used as digits. Needs at least 16 unique
            characters.
        separators: Separator candidates. Only those present in
            ``alphabet`` are used.

    Raises:
        ConfigurationError: If the configuration is invalid.

    Example:
        >>> codec = Hashids(salt="this is my salt")
        >>> codec.encode(12345)
        'NkK9'
        >>> codec.decode("NkK9")
        (12345,)
    """

    __slots__ = (
        "_config",
        "_alphabet",
        "_separators",
        "_separator_table",
        "_guards",
        "_guard_set",
        "_salt",
        "_min_length",
    )

    def __init__(
        self,
        salt: str = "",
        min_length: int = 0,
        alphabet: str = DEFAULT_ALPHABET,
        separators: str = DEFAULT_SEPARATORS,
    ) -> None:
        config = build_config(
            salt=salt, min_length=min_length, alphabet=alphabet, separators=separators
        )
        partition = partition_alphabet(config.alphabet, config.separators, config.salt)
        self._config = config
        self._alphabet = partition.alphabet
        self._separators = partition.separators
        # Every separator collapses onto the first one so a single split works.
        self._separator_table = str.maketrans(
            {char: partition.separators[0] for char in partition.separators}
        )
        self._guards = partition.guards
        self._guard_set = frozenset(partition.guards)
        self._salt = partition.salt
        self._min_length = config.min_length
        logfire.debug(
            "Hashids configured",
            min_length=self._min_length,
            alphabet_length=len(self._alphabet),
        )

    @classmethod
    def from_config(cls, config: HashidsConfig) -> "Hashids":
        """Return an encoder built from a validated ``config``."""

        return cls(**config.model_dump())

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Hashids":
        """Return an encoder built from runtime ``settings``."""

        return cls(
            salt=settings.salt,
            min_length=settings.min_length,
            alphabet=settings.alphabet,
            separators=settings.separators,
        )

    @property
    def config(self) -> HashidsConfig:
        """Return the validated construction parameters."""
        return self._config

    @property
    def alphabet(self) -> str:
        """Return the working alphabet after separator and guard extraction."""
        return self._alphabet

    @property
    def separators(self) -> str:
        """Return the separator characters."""
        return self._separators

    @property
    def guards(self) -> str:
        """Return the guard characters."""
        return self._guards

    @property
    def min_length(self) -> int:
        """Return the configured minimum hashid length."""
        return self._min_length

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(min_length={self._min_length},"
            f" alphabet={self._config.alphabet!r},"
            f" separators={self._config.separators!r})"
        )

    # Numeric contract

    def encode(self, *numbers: int | Iterable[int]) -> str:
        """Return the hashid for ``numbers``.

        Accepts either positional integers or one iterable of integers.

        Args:
            *numbers: Values in the unsigned 64-bit range.

        Returns:
            str: The hashid, or ``""`` when no numbers are given or any number
            is negative or wider than 64 bits.

        Raises:
            TypeError: If a value is not an integer.
        """

        values = _coerce_numbers(numbers)
        if not values:
            return ""
        if any(value < 0 or value > UINT64_MAX for value in values):
            logfire.debug("Rejected numbers outside the unsigned 64-bit range")
            return ""
        return self._encode(values)

    def decode(self, hashid: str) -> tuple[int, ...]:
        """Return the numbers encoded in ``hashid``.

        Returns:
            tuple[int, ...]: The decoded numbers, or ``()`` when ``hashid`` is
            blank or is not a valid hashid for this configuration.
        """

        if not isinstance(hashid, str):
            raise TypeError("hashid must be a string")
        if is_blank(hashid):
            return ()
        try:
            return self._decode(hashid)
        except InvalidHashidError as exc:
            logfire.debug("Rejected hashid", reason=exc.reason)
            return ()

    def decode_strict(self, hashid: str) -> tuple[int, ...]:
        """Return the numbers encoded in ``hashid`` or raise.

        Unlike :meth:`decode`, an invalid hashid is distinguishable from the
        empty string, which is the valid encoding of zero numbers.

        Raises:
            InvalidHashidError: If ``hashid`` is not a valid hashid.
        """

        if not isinstance(hashid, str):
            raise TypeError("hashid must be a string")
        if hashid == "":
            return ()
        if is_blank(hashid):
            raise InvalidHashidError(hashid, "blank hashid")
        return self._decode(hashid)

    def decode_int64(self, hashid: str) -> tuple[int, ...]:
        """Decode ``hashid`` into signed 64-bit values.

        Raises:
            DecodeOverflowError: If a decoded number exceeds ``2**63 - 1``.
        """

        return self._decode_signed(hashid, 64, INT64_MAX)

    def decode_int32(self, hashid: str) -> tuple[int, ...]:
        """Decode ``hashid`` into signed 32-bit values.

        Raises:
            DecodeOverflowError: If a decoded number exceeds ``2**31 - 1``.
        """

        return self._decode_signed(hashid, 32, INT32_MAX)

    def _decode_signed(self, hashid: str, bits: int, limit: int) -> tuple[int, ...]:
        numbers = self.decode(hashid)
        for number in numbers:
            if number > limit:
                raise DecodeOverflowError(number, bits)
        return numbers

    # Adapters

    def encode_hex(self, hex_string: str) -> str:
        """Return the hashid for a hexadecimal string, or ``""`` if not hex."""
        return hex_adapter.encode_hex(self, hex_string)

    def decode_hex(self, hashid: str) -> str:
        """Return the uppercase hexadecimal string encoded in ``hashid``."""
        return hex_adapter.decode_hex(self, hashid)

    def encode_uint128(self, value: int) -> str:
        """Return the hashid for a 128-bit unsigned integer."""
        return uint128_adapter.encode_uint128(self, value)

    def decode_uint128(self, hashid: str) -> int:
        """Return the 128-bit unsigned integer encoded in ``hashid``."""
        return uint128_adapter.decode_uint128(self, hashid)

    def encode_uuid(self, value: UUID) -> str:
        """Return the hashid for ``value``."""
        return uint128_adapter.encode_uuid(self, value)

    def decode_uuid(self, hashid: str) -> UUID:
        """Return the UUID encoded in ``hashid``."""
        return uint128_adapter.decode_uuid(self, hashid)

    # Internals

    def _encode(self, numbers: Sequence[int]) -> str:
        """Assemble the hashid for already validated ``numbers``."""

        if not numbers:
            return ""
        alphabet = self._alphabet
        separators = self._separators
        fingerprint = sum(
            number % (index + FINGERPRINT_OFFSET)
            for index, number in enumerate(numbers)
        )
        lottery = alphabet[fingerprint % len(alphabet)]

        parts = [lottery]
        last = len(numbers) - 1
        for index, number in enumerate(numbers):
            alphabet = consistent_shuffle(alphabet, lottery + self._salt + alphabet)
            digits = encode_digits(number, alphabet)
            parts.append(digits)
            if index < last:
                number %= ord(digits[0]) + index
                parts.append(separators[number % len(separators)])
        hashid = "".join(parts)

        min_length = self._min_length
        if len(hashid) < min_length:
            guards = self._guards
            guard = guards[(fingerprint + ord(hashid[0])) % len(guards)]
            hashid = guard + hashid
            if len(hashid) < min_length:
                guard = guards[(fingerprint + ord(hashid[2])) % len(guards)]
                hashid += guard

        half = len(alphabet) // 2
        while len(hashid) < min_length:
            alphabet = consistent_shuffle(alphabet, alphabet)
            hashid = alphabet[half:] + hashid + alphabet[:half]
            excess = len(hashid) - min_length
            if excess > 0:
                start = excess // 2
                hashid = hashid[start : start + min_length]
        return hashid

    def _strip_guards(self, hashid: str) -> str:
        """Return the part of ``hashid`` between its first two guards."""

        start = _find_any(hashid, self._guard_set)
        if start < 0:
            return hashid
        start += 1
        end = _find_any(hashid, self._guard_set, start)
        if end < 0:
            end = len(hashid)
        return hashid[start:end]

    def _decode(self, hashid: str) -> tuple[int, ...]:
        """Disassemble ``hashid`` and verify it by re-encoding.

        Raises:
            InvalidHashidError: If ``hashid`` is not a valid hashid.
        """

        body = self._strip_guards(hashid)
        if not body:
            raise InvalidHashidError(hashid, "no content between guards")

        lottery = body[0]
        fragments = [
            fragment
            for fragment in body[1:]
            .translate(self._separator_table)
            .split(self._separators[0])
            if fragment
        ]

        alphabet = self._alphabet
        numbers = []
        for fragment in fragments:
            key = (lottery + self._salt + alphabet)[: len(alphabet)]
            alphabet = consistent_shuffle(alphabet, key)
            try:
                number = decode_digits(fragment, alphabet)
            except InvalidHashidError as exc:
                raise InvalidHashidError(hashid, exc.reason) from exc
            if number > UINT64_MAX:
                raise InvalidHashidError(hashid, "number wider than 64 bits")
            numbers.append(number)

        result = tuple(numbers)
        if self._encode(result) != hashid:
            raise InvalidHashidError(hashid, "does not match its re-encoding")
        return result


__all__ = ["Hashids"]
