# SPDX-License-Identifier: MIT
"""Pydantic models describing encoder configuration.

``HashidsConfig`` is the contract between the settings loader, the command-line
interface and :class:`idmask.core.codec.Hashids`. It validates the raw values
supplied by callers before the alphabet is partitioned.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import DEFAULT_ALPHABET, DEFAULT_SEPARATORS, MIN_ALPHABET_LENGTH
from .errors import ConfigurationError
from .utils.text import is_blank


class StrictModel(BaseModel):
    """Base model with strict settings to prevent shape drift."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=False)


class HashidsConfig(StrictModel):
    """Immutable construction parameters for an encoder instance."""

    model_config = ConfigDict(frozen=True)

    salt: str = Field("", description="Key driving every deterministic shuffle.")
    min_length: Annotated[
        int, Field(ge=0, description="Minimum length of generated hashids.")
    ] = 0
    alphabet: str = Field(
        DEFAULT_ALPHABET, description="Characters used as encoding digits."
    )
    separators: str = Field(
        DEFAULT_SEPARATORS,
        description="Candidate characters reserved to delimit encoded numbers.",
    )

    @field_validator("alphabet")
    @classmethod
    def _validate_alphabet(cls, value: str) -> str:
        """Reject blank alphabets and those with too few unique characters."""

        if is_blank(value):
            raise ValueError("alphabet must not be blank")
        unique = len(dict.fromkeys(value))
        if unique < MIN_ALPHABET_LENGTH:
            raise ValueError(
                f"alphabet must contain at least {MIN_ALPHABET_LENGTH} unique"
                f" characters, got {unique}"
            )
        return value


def build_config(**values: object) -> HashidsConfig:
    """Return a validated :class:`HashidsConfig`.

    Args:
        **values: Field values accepted by :class:`HashidsConfig`.

    Returns:
        HashidsConfig: Validated configuration.

    Raises:
        ConfigurationError: If any value is missing or invalid.
    """

    try:
        return HashidsConfig.model_validate(values)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {details}") from exc


__all__ = ["HashidsConfig", "StrictModel", "build_config"]
