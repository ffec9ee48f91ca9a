# SPDX-License-Identifier: MIT
"""Wrappers mapping other identifier shapes onto the numeric contract.

Exports:
    hex: Hexadecimal string encoding in 12-digit chunks.
    uint128: 128-bit integer and UUID encoding as two 64-bit halves.
"""
