# SPDX-License-Identifier: MIT
"""Command-line front end."""

from .main import main

__all__ = ["main"]
