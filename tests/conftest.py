# SPDX-License-Identifier: MIT
"""Test configuration for idmask.

Keeps logfire output local and strips ``IDMASK_*`` variables so tests see
default settings.
"""

from __future__ import annotations

import os

import logfire
import pytest

from idmask import Hashids

logfire.configure(send_to_logfire=False, console=False)

SALT = "this is my salt"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove configuration variables inherited from the environment."""

    for name in list(os.environ):
        if name.upper().startswith("IDMASK_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def codec() -> Hashids:
    """Encoder with the default configuration."""

    return Hashids()


@pytest.fixture
def salted() -> Hashids:
    """Encoder salted like the published reference vectors."""

    return Hashids(salt=SALT)
