# SPDX-License-Identifier: MIT
"""Salt-keyed deterministic permutation of character sequences."""

from __future__ import annotations

from ..utils.text import is_blank


def consistent_shuffle(sequence: str, key: str) -> str:
    """Return ``sequence`` permuted by ``key``.

    The permutation is a keyed Fisher-Yates pass from the last index down to
    index 1. It is reproducible, not random: identical ``sequence`` and ``key``
    always give identical output, and the exact index arithmetic must stay
    stable so previously issued hashids keep decoding.

    Args:
        sequence: Characters to permute.
        key: Characters driving the permutation. Only the first
            ``len(sequence) - 1`` characters are ever read.

    Returns:
        str: The permuted characters, or ``sequence`` itself when ``key`` is
        empty or whitespace only.
    """

    if is_blank(key):
        return sequence

    letters = list(sequence)
    key_length = len(key)
    v = 0
    p = 0
    for i in range(len(letters) - 1, 0, -1):
        v %= key_length
        n = ord(key[v])
        p += n
        j = (n + v + p) % i
        letters[i], letters[j] = letters[j], letters[i]
        v += 1
    return "".join(letters)


__all__ = ["consistent_shuffle"]
