# SPDX-License-Identifier: MIT
"""Tests for the configuration model."""

import pytest
from pydantic import ValidationError

from idmask.errors import ConfigurationError
from idmask.models import HashidsConfig, build_config


def test_defaults() -> None:
    config = HashidsConfig()
    assert config.salt == ""
    assert config.min_length == 0


def test_config_is_frozen() -> None:
    config = HashidsConfig()
    with pytest.raises(ValidationError):
        config.salt = "changed"  # type: ignore[misc]


def test_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        HashidsConfig(pepper="x")  # type: ignore[call-arg]


def test_counts_unique_characters() -> None:
    HashidsConfig(alphabet="abcdefghijklmnop" * 3)
    with pytest.raises(ValidationError, match="at least 16 unique"):
        HashidsConfig(alphabet="abcdefgh" * 4)


def test_build_config_summarises_errors() -> None:
    with pytest.raises(ConfigurationError, match="min_length"):
        build_config(min_length=-1)
