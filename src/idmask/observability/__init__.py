# SPDX-License-Identifier: MIT
"""Logging configuration helpers.

Exports:
    init_logfire: Configure Pydantic Logfire for command-line runs.
"""

from .monitoring import init_logfire

__all__ = ["init_logfire"]
