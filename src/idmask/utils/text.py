# SPDX-License-Identifier: MIT
"""String helpers shared by configuration checks and the codec."""

from __future__ import annotations

from ..constants import WHITESPACE


def is_blank(text: str | None) -> bool:
    """Return ``True`` when ``text`` is ``None``, empty or only white space.

    White space follows ``WHITESPACE`` rather than ``str.isspace`` so that
    keys such as ``"\\x1c"`` still shuffle as they do in other Hashids ports.
    """

    return not text or all(char in WHITESPACE for char in text)


__all__ = ["is_blank"]
