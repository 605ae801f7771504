"""License summary Pydantic models."""
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class LicenseSummary(BaseModel):
    """Modules grouped by approval state.

    ``approved`` and ``unapproved`` map a license string to the number of
    modules carrying it. ``unprocessed`` lists modules with no license that
    are not otherwise approved.
    """

    model_config = {"extra": "forbid"}

    approved: Dict[str, int] = Field(default_factory=dict)
    unapproved: Dict[str, int] = Field(default_factory=dict)
    unprocessed: List[str] = Field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """Check if any module is unapproved or unprocessed."""
        return bool(self.unapproved) or bool(self.unprocessed)
