"""Flattened dependency Pydantic models."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field


def make_module_key(name: str, version: str) -> str:
    """Build the ``name@version`` identity for a module."""
    return f"{name}@{version}"


class ModuleRecord(BaseModel):
    """License and metadata for one resolved module.

    ``licenses`` holds a single SPDX identifier or a compound expression
    such as ``(MIT OR CC0-1.0)``. None means no license was declared.
    """

    model_config = {"extra": "forbid", "frozen": True}

    licenses: Optional[str] = Field(
        default=None,
        description="Declared license identifier or expression",
    )
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Remaining fields of the tree node, without dependencies",
    )

    @property
    def is_unprocessed(self) -> bool:
        """Check if the module declares no license.

        Returns:
            True if licenses is None or empty.
        """
        return not self.licenses


# Read-only mapping of module key to record, in depth-first encounter order.
FlatModuleMap = Mapping[str, ModuleRecord]
