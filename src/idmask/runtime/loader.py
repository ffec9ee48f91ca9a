# SPDX-License-Identifier: MIT
"""YAML configuration file loading.

Configuration files hold the same keys as the ``IDMASK_*`` environment
variables, in lower case:

.. code-block:: yaml

    salt: my project salt
    min_length: 8
    log_level: info
"""

from __future__ import annotations

from pathlib import Path

import logfire
import yaml
from pydantic import Field, TypeAdapter, ValidationError

from ..models import StrictModel
from ..utils import ErrorHandler, LoggingErrorHandler


class FileConfig(StrictModel):
    """Optional encoder and logging values read from a YAML file."""

    salt: str | None = Field(None, description="Shuffle key.")
    min_length: int | None = Field(None, ge=0, description="Minimum hashid length.")
    alphabet: str | None = Field(None, description="Digit characters.")
    separators: str | None = Field(None, description="Separator candidates.")
    log_level: str | None = Field(None, description="Logging verbosity level.")


def load_config_file(
    path: Path | str, error_handler: ErrorHandler | None = None
) -> FileConfig:
    """Return configuration loaded from the YAML file at ``path``.

    An empty file yields a configuration with every value unset.

    Args:
        path: File location.
        error_handler: Processor for any errors encountered.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        RuntimeError: If the file cannot be parsed or fails validation.
    """

    handler = error_handler or LoggingErrorHandler()
    path = Path(path)
    with logfire.span("fs.read_yaml", attributes={"path": str(path)}):
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
            return TypeAdapter(FileConfig).validate_python(raw or {})
        except FileNotFoundError:
            handler.handle(f"Configuration file not found: {path}")
            raise
        except (ValidationError, yaml.YAMLError, OSError) as exc:
            handler.handle(f"Error reading YAML file {path}", exc)
            raise RuntimeError(
                f"An error occurred while reading the YAML file: {exc}"
            ) from exc


__all__ = ["FileConfig", "load_config_file"]
