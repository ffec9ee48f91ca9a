# SPDX-License-Identifier: MIT
"""Runtime configuration for the command-line front end."""

from .loader import FileConfig, load_config_file
from .settings import Settings, load_settings

__all__ = ["FileConfig", "Settings", "load_config_file", "load_settings"]
