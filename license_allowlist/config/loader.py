"""Allowlist configuration loading for license-allowlist."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from license_allowlist.config.defaults import get_default_config
from license_allowlist.constants import EMPTY_CONFIG_MESSAGE, MISSING_ROOT_KEY_MESSAGE
from license_allowlist.exceptions import (
    ConfigurationError,
    EmptyConfigError,
    SchemaError,
)
from license_allowlist.models.config import AllowlistConfig

logger = logging.getLogger(__name__)


def load_config_file(path: Path | str) -> AllowlistConfig:
    """Load and validate the allowlist from a YAML file.

    Checks run in a fixed order and the first failure is reported:
    empty content, then the ``modules`` key, then the ``licenses`` key.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated AllowlistConfig instance.

    Raises:
        EmptyConfigError: If the file is empty or whitespace only.
        SchemaError: If ``modules`` or ``licenses`` is missing or not a list,
            or an entry is not a string.
        ConfigurationError: If the file cannot be read or is not valid YAML.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, PermissionError) as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    if not content.strip():
        raise EmptyConfigError(EMPTY_CONFIG_MESSAGE)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in '{path}': {e}"
        ) from e

    _require_list(data, "modules")
    _require_list(data, "licenses")

    try:
        config = AllowlistConfig.model_validate(
            {"licenses": data["licenses"], "modules": data["modules"]}
        )
    except ValidationError as e:
        raise SchemaError(
            f"Invalid configuration in '{path}': {_format_validation_errors(e)}"
        ) from e

    logger.debug(
        "Loaded %d licenses and %d modules from %s",
        len(config.licenses),
        len(config.modules),
        path,
    )
    return config


def _require_list(data: Any, key: str) -> None:
    """Raise SchemaError unless ``data[key]`` is a list."""
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise SchemaError(MISSING_ROOT_KEY_MESSAGE.format(key=key))


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def get_or_default_config(path: Path | str) -> AllowlistConfig:
    """Load the allowlist, or start from an empty one if there is no file.

    Args:
        path: Path to the configuration file.

    Returns:
        AllowlistConfig loaded from the file, or the default config when
        the file does not exist.

    Raises:
        ConfigurationError: Any error raised by load_config_file.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No configuration file at %s, using defaults", path)
        return get_default_config()
    return load_config_file(path)
