# SPDX-License-Identifier: MIT
"""Reversible, salt-keyed obfuscation of integer identifiers.

``idmask`` turns sequences of non-negative integers into short strings that
hide sequential database identifiers, and turns those strings back into the
original numbers. It is not encryption.

Exports:
    Hashids: The encoder.
    HashidsConfig: Validated construction parameters.
    ConfigurationError: Invalid encoder configuration.
    InvalidHashidError: Raised by strict decoding of a bad hashid.
    DecodeOverflowError: Decoded value wider than the requested width.
"""

from .constants import DEFAULT_ALPHABET, DEFAULT_SEPARATORS
from .core import Hashids
from .errors import (
    ConfigurationError,
    DecodeOverflowError,
    IdmaskError,
    InvalidHashidError,
)
from .models import HashidsConfig

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_SEPARATORS",
    "ConfigurationError",
    "DecodeOverflowError",
    "Hashids",
    "HashidsConfig",
    "IdmaskError",
    "InvalidHashidError",
]
