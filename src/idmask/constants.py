# SPDX-License-Identifier: MIT
"""Project-wide constants shared by the encoder and its adapters.

Keep this file minimal and free of side effects.
"""

from __future__ import annotations

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
DEFAULT_SEPARATORS = "cfhistuCFHISTU"

MIN_ALPHABET_LENGTH = 16
SEPARATOR_RATIO = 3.5
GUARD_RATIO = 12.0

# Lottery fingerprint modulus offset: ``number % (index + FINGERPRINT_OFFSET)``.
FINGERPRINT_OFFSET = 100

UINT64_MAX = 2**64 - 1
INT64_MAX = 2**63 - 1
INT32_MAX = 2**31 - 1
UINT128_MAX = 2**128 - 1

HEX_CHUNK_SIZE = 12
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Characters .NET treats as white space (``char.IsWhiteSpace``). Unlike
# ``str.isspace`` this excludes the separators U+001C to U+001F.
WHITESPACE = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)

ENV_PREFIX = "IDMASK_"

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_SEPARATORS",
    "ENV_PREFIX",
    "FINGERPRINT_OFFSET",
    "GUARD_RATIO",
    "HEX_CHUNK_SIZE",
    "HEX_DIGITS",
    "INT32_MAX",
    "INT64_MAX",
    "MIN_ALPHABET_LENGTH",
    "SEPARATOR_RATIO",
    "UINT128_MAX",
    "UINT64_MAX",
    "WHITESPACE",
]
