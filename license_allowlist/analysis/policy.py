"""Allowlist checks for flattened dependencies."""
from __future__ import annotations

from typing import Iterable, Mapping, Optional

from license_allowlist.models.config import AllowlistConfig
from license_allowlist.models.module import FlatModuleMap, ModuleRecord


def is_module_approved(key: str, record: ModuleRecord, config: AllowlistConfig) -> bool:
    """Check whether a module is covered by the allowlist.

    License strings are compared verbatim, so a compound expression such
    as ``(MIT OR CC0-1.0)`` only matches that exact entry.

    Args:
        key: Module key (name@version).
        record: The module's record.
        config: The allowlist.

    Returns:
        True if the license or the module key is approved.
    """
    return record.licenses in config.license_set or key in config.module_set


def get_invalid_modules(
    modules: FlatModuleMap,
    config: AllowlistConfig,
) -> Optional[dict[str, ModuleRecord]]:
    """Collect modules that are neither license-approved nor module-approved.

    Args:
        modules: Flattened module map.
        config: The allowlist.

    Returns:
        Unapproved modules in encounter order, or None if every module
        is approved.
    """
    license_set = config.license_set
    module_set = config.module_set
    invalid = {
        key: record
        for key, record in modules.items()
        if record.licenses not in license_set and key not in module_set
    }
    return invalid or None


def get_unapproved_licenses(
    invalid_modules: Optional[Mapping[str, ModuleRecord]],
) -> list[str]:
    """List the distinct licenses of unapproved modules.

    Modules without a license are skipped since there is nothing to approve.

    Args:
        invalid_modules: Result of get_invalid_modules.

    Returns:
        License strings in order of first appearance.
    """
    if not invalid_modules:
        return []
    seen: dict[str, None] = {}
    for record in invalid_modules.values():
        if record.licenses:
            seen.setdefault(record.licenses, None)
    return list(seen)


def get_unapproved_modules(
    invalid_modules: Optional[Mapping[str, ModuleRecord]],
    approved_licenses: Iterable[str],
    approved_modules: Iterable[str],
) -> list[str]:
    """List unapproved module keys still not covered by the allowlist.

    Args:
        invalid_modules: Result of get_invalid_modules.
        approved_licenses: Licenses approved so far.
        approved_modules: Module keys approved so far.

    Returns:
        Module keys in encounter order.
    """
    if not invalid_modules:
        return []
    license_set = set(approved_licenses)
    module_set = set(approved_modules)
    return [
        key
        for key, record in invalid_modules.items()
        if record.licenses not in license_set and key not in module_set
    ]
