"""Allowlist configuration handling for license-allowlist."""
from __future__ import annotations

from license_allowlist.config.defaults import DEFAULT_CONFIG_NAME, get_default_config
from license_allowlist.config.loader import get_or_default_config, load_config_file
from license_allowlist.config.writer import dump_config, write_config
from license_allowlist.models.config import AllowlistConfig

__all__ = [
    "AllowlistConfig",
    "DEFAULT_CONFIG_NAME",
    "dump_config",
    "get_default_config",
    "get_or_default_config",
    "load_config_file",
    "write_config",
]
