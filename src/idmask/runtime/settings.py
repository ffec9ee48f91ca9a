# SPDX-License-Identifier: MIT
"""Centralised configuration management.

This module exposes :class:`Settings`, a ``pydantic-settings`` model that
combines values sourced from an optional YAML configuration file and
``IDMASK_*`` environment variables. Environment variables take precedence
over file-based values and the merged configuration is validated before use.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    EnvSettingsSource,
    SettingsConfigDict,
)

from ..constants import DEFAULT_ALPHABET, DEFAULT_SEPARATORS, ENV_PREFIX
from ..models import build_config
from .loader import load_config_file

LogLevel = Literal["fatal", "error", "warn", "notice", "info", "debug", "trace"]


class Settings(BaseSettings):
    """Encoder and logging settings combining file and environment values."""

    salt: str = Field("", description="Shuffle key.", repr=False)
    min_length: int = Field(0, ge=0, description="Minimum hashid length.")
    alphabet: str = Field(DEFAULT_ALPHABET, description="Digit characters.")
    separators: str = Field(
        DEFAULT_SEPARATORS, description="Separator candidate characters."
    )
    log_level: LogLevel = Field("warn", description="Logging verbosity level.")
    logfire_token: str | None = Field(
        None, description="Logfire authentication token, if available.", repr=False
    )

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    @model_validator(mode="after")
    def _validate_encoder(self) -> "Settings":
        """Ensure the encoder values form a usable configuration."""

        build_config(
            salt=self.salt,
            min_length=self.min_length,
            alphabet=self.alphabet,
            separators=self.separators,
        )
        return self


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Values are read from the optional YAML file at ``config_path`` and then
    merged with environment variables using ``pydantic-settings``. A ``.env``
    file in the working directory is loaded automatically when present. When a
    value is set in the file and in the environment or ``.env``, the
    environment value wins.

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Settings: Fully validated configuration.

    Raises:
        RuntimeError: If configuration values are invalid or the file cannot
            be read.
    """

    file_values: dict[str, object] = {}
    if config_path:
        config = load_config_file(config_path)
        file_values = config.model_dump(exclude_none=True)
    env_file_path = Path(".env")
    env_file = env_file_path if env_file_path.exists() else None
    # Init arguments outrank the environment in pydantic-settings, so file
    # values are only passed for keys neither the environment nor ``.env`` set.
    environment = EnvSettingsSource(Settings)()
    if env_file is not None:
        environment.update(DotEnvSettingsSource(Settings, env_file=env_file)())
    overrides = {
        key: value for key, value in file_values.items() if key not in environment
    }
    try:
        return Settings(**overrides, _env_file=env_file)  # type: ignore[arg-type]
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc


__all__ = ["LogLevel", "Settings", "load_settings"]
