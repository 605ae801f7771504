"""Allowlist configuration Pydantic models for license-allowlist."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class AllowlistConfig(BaseModel):
    """Approved licenses and approved modules.

    Both lists keep insertion order, which is the order entries were
    approved in, so the file round-trips unchanged. Use ``license_set``
    and ``module_set`` for membership tests.
    """

    model_config = {"extra": "forbid"}

    licenses: List[str] = Field(
        default_factory=list,
        description="Approved license identifiers or compound expressions.",
    )
    modules: List[str] = Field(
        default_factory=list,
        description="Approved modules as name@version keys.",
    )

    @property
    def license_set(self) -> frozenset[str]:
        """Approved licenses as a lookup set."""
        return frozenset(self.licenses)

    @property
    def module_set(self) -> frozenset[str]:
        """Approved module keys as a lookup set."""
        return frozenset(self.modules)
