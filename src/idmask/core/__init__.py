# SPDX-License-Identifier: MIT
"""Encoding engine.

Exports:
    Hashids: Salt-keyed reversible encoder for non-negative integers.
    AlphabetPartition: Working alphabet, separators and guards.
    partition_alphabet: Derive an :class:`AlphabetPartition`.
    consistent_shuffle: Keyed deterministic permutation.
    encode_digits: Write an integer with alphabet digits.
    decode_digits: Read an integer from alphabet digits.
"""

from .alphabet import AlphabetPartition, partition_alphabet
from .codec import Hashids
from .digits import decode_digits, encode_digits
from .shuffle import consistent_shuffle

__all__ = [
    "AlphabetPartition",
    "Hashids",
    "consistent_shuffle",
    "decode_digits",
    "encode_digits",
    "partition_alphabet",
]
