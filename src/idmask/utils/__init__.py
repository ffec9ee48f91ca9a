# SPDX-License-Identifier: MIT
"""Utility interfaces and implementations."""

from .error_handler import ErrorHandler, LoggingErrorHandler
from .text import is_blank

__all__ = ["ErrorHandler", "LoggingErrorHandler", "is_blank"]
