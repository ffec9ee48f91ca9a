# SPDX-License-Identifier: MIT
"""Helpers for enabling Pydantic Logfire telemetry.

The library itself only emits records. Configuration happens here and is
called by the command-line front end; embedding applications configure
logfire themselves.
"""

from __future__ import annotations

import os

import logfire

from ..constants import ENV_PREFIX
from ..runtime.settings import LogLevel

SERVICE_NAME = "idmask"


def _mask_token(value: str | None) -> str | None:
    """Return a masked representation of ``value`` for safe logging."""

    if not value:
        return None
    return f"{value[:4]}..."


def init_logfire(token: str | None = None, min_log_level: LogLevel = "warn") -> None:
    """Configure Logfire console and telemetry output.

    Args:
        token: Optional Logfire API token. If omitted, ``IDMASK_LOGFIRE_TOKEN``
            from the environment is used. Missing tokens keep telemetry local.
        min_log_level: Minimum level for console and telemetry output.
    """

    key = token or os.getenv(f"{ENV_PREFIX}LOGFIRE_TOKEN")
    masked = _mask_token(key)
    logfire.configure(
        token=key,
        send_to_logfire="if-token-present",
        service_name=SERVICE_NAME,
        console=logfire.ConsoleOptions(
            min_log_level=min_log_level,
            show_project_link=False,
            verbose=True,
        ),
        min_level=min_log_level,
    )
    logfire.debug("Configured logfire", token=masked)


__all__ = ["SERVICE_NAME", "init_logfire"]
