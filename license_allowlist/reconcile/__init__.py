"""Interactive allowlist reconciliation for license-allowlist."""
from license_allowlist.reconcile.engine import (
    Answer,
    ReconciliationEngine,
    ReconciliationResult,
    WalkResult,
    WalkStatus,
)
from license_allowlist.reconcile.prompt import PromptFn, click_prompt

__all__ = [
    "Answer",
    "PromptFn",
    "ReconciliationEngine",
    "ReconciliationResult",
    "WalkResult",
    "WalkStatus",
    "click_prompt",
]
