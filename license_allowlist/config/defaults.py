"""Default configuration values for license-allowlist."""

from __future__ import annotations

from license_allowlist.constants import DEFAULT_CONFIG_NAME
from license_allowlist.models.config import AllowlistConfig

__all__ = ["DEFAULT_CONFIG_NAME", "get_default_config"]


def get_default_config() -> AllowlistConfig:
    """Get the default configuration.

    Returns:
        AllowlistConfig with empty license and module lists.
    """
    return AllowlistConfig(licenses=[], modules=[])
