"""Group flattened modules into approved, unapproved and unprocessed."""
from __future__ import annotations

from license_allowlist.analysis.policy import is_module_approved
from license_allowlist.models.config import AllowlistConfig
from license_allowlist.models.module import FlatModuleMap
from license_allowlist.models.summary import LicenseSummary

# Label for module-approved modules that declare no license
UNKNOWN_LICENSE = "UNKNOWN"


def summarize(modules: FlatModuleMap, config: AllowlistConfig) -> LicenseSummary:
    """Count modules per license for each approval state.

    Approved licenses are listed in config order first, then any other
    approved license (through the module list) in encounter order.
    Unapproved licenses are listed in encounter order.

    Args:
        modules: Flattened module map.
        config: The allowlist.

    Returns:
        LicenseSummary for the run.
    """
    approved_counts: dict[str, int] = {}
    unapproved: dict[str, int] = {}
    unprocessed: list[str] = []

    for key, record in modules.items():
        license_id = record.licenses or UNKNOWN_LICENSE
        if is_module_approved(key, record, config):
            approved_counts[license_id] = approved_counts.get(license_id, 0) + 1
        elif record.is_unprocessed:
            unprocessed.append(key)
        else:
            unapproved[license_id] = unapproved.get(license_id, 0) + 1

    approved: dict[str, int] = {}
    for license_id in config.licenses:
        if license_id in approved_counts:
            approved[license_id] = approved_counts[license_id]
    for license_id, count in approved_counts.items():
        approved.setdefault(license_id, count)

    return LicenseSummary(
        approved=approved,
        unapproved=unapproved,
        unprocessed=unprocessed,
    )
