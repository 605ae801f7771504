"""Allowlist configuration writing for license-allowlist."""
from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

import yaml

from license_allowlist.exceptions import ConfigurationError
from license_allowlist.models.config import AllowlistConfig

logger = logging.getLogger(__name__)


class _BlockListDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their parent key."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> Any:
        return super().increase_indent(flow, False)


def dump_config(config: AllowlistConfig) -> str:
    """Serialize the allowlist to YAML text.

    Non-empty lists render one ``  - entry`` line per item in stored
    order. Empty lists render as ``[]``.

    Args:
        config: The allowlist to serialize.

    Returns:
        YAML document ending in a single newline.
    """
    data = {"licenses": list(config.licenses), "modules": list(config.modules)}
    return yaml.dump(
        data,
        Dumper=_BlockListDumper,
        default_flow_style=False,
        sort_keys=False,
        indent=2,
        width=float("inf"),
        allow_unicode=True,
    )


def write_config(path: Path | str, config: AllowlistConfig) -> None:
    """Write the allowlist to disk, replacing the file atomically.

    Args:
        path: Destination configuration file.
        config: The allowlist to persist.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    path = Path(path)
    content = dump_config(config)

    tmp_name = None
    try:
        # Keep the permissions of an existing file
        mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else 0o644
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ConfigurationError(
            f"Cannot write configuration file '{path}': {e}"
        ) from e

    logger.info(
        "Wrote %d licenses and %d modules to %s",
        len(config.licenses),
        len(config.modules),
        path,
    )
