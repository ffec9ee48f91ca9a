# SPDX-License-Identifier: MIT
"""Construction-time split of a raw alphabet into digits, separators and guards.

The partition runs once per encoder. Its output is immutable and every encode
or decode call reads it without modification.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import logfire

from ..constants import GUARD_RATIO, MIN_ALPHABET_LENGTH, SEPARATOR_RATIO
from ..errors import ConfigurationError
from ..utils.text import is_blank
from .shuffle import consistent_shuffle


@dataclass(frozen=True)
class AlphabetPartition:
    """Working character sets derived from the raw configuration."""

    alphabet: str
    separators: str
    guards: str
    salt: str


def _unique(chars: str) -> str:
    """Return ``chars`` without duplicates, keeping first occurrences."""

    return "".join(dict.fromkeys(chars))


def _balance_separators(alphabet: str, separators: str) -> tuple[str, str]:
    """Grow or shrink ``separators`` toward the alphabet/separator ratio."""

    # Integer quotient; a true division reorders some custom alphabets.
    if separators and len(alphabet) // len(separators) <= SEPARATOR_RATIO:
        return alphabet, separators

    target = max(math.ceil(len(alphabet) / SEPARATOR_RATIO), 2)
    if target > len(separators):
        deficit = target - len(separators)
        return alphabet[deficit:], separators + alphabet[:deficit]
    return alphabet, separators[:target]


def partition_alphabet(alphabet: str, separators: str, salt: str) -> AlphabetPartition:
    """Derive the working alphabet, separators and guards.

    Args:
        alphabet: Raw alphabet supplied by the caller. Duplicates are removed.
        separators: Separator candidates. Characters absent from ``alphabet``
            are ignored.
        salt: Key for the deterministic shuffles.

    Returns:
        AlphabetPartition: Pairwise disjoint character sets and the salt
        truncated to the length later shuffles actually consume.

    Raises:
        ConfigurationError: If ``alphabet`` is blank or holds fewer than
            ``MIN_ALPHABET_LENGTH`` unique characters, or when the separator
            candidates leave no usable digits, separators or guards.
    """

    if is_blank(alphabet):
        raise ConfigurationError("alphabet must not be blank")
    alphabet = _unique(alphabet)
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise ConfigurationError(
            f"alphabet must contain at least {MIN_ALPHABET_LENGTH} unique"
            f" characters, got {len(alphabet)}"
        )

    separators = "".join(c for c in _unique(separators) if c in alphabet)
    alphabet = "".join(c for c in alphabet if c not in separators)
    separators = consistent_shuffle(separators, salt)

    alphabet, separators = _balance_separators(alphabet, separators)
    alphabet = consistent_shuffle(alphabet, salt)

    guard_count = math.ceil(len(alphabet) / GUARD_RATIO)
    if len(alphabet) < 3:
        guards = separators[:guard_count]
        separators = separators[guard_count:]
    else:
        guards = alphabet[:guard_count]
        alphabet = alphabet[guard_count:]

    if len(alphabet) < 2 or not separators or not guards:
        raise ConfigurationError(
            "separator candidates leave too few characters to encode with:"
            f" {len(alphabet)} digits, {len(separators)} separators,"
            f" {len(guards)} guards"
        )

    logfire.debug(
        "Alphabet partitioned",
        alphabet_length=len(alphabet),
        separator_count=len(separators),
        guard_count=len(guards),
    )
    return AlphabetPartition(
        alphabet=alphabet,
        separators=separators,
        guards=guards,
        salt=salt[: len(alphabet) - 1],
    )


__all__ = ["AlphabetPartition", "partition_alphabet"]
