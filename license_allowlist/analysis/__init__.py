"""License allowlist analysis for license-allowlist."""
from license_allowlist.analysis.flatten import flatten_tree, normalize_license
from license_allowlist.analysis.policy import (
    get_invalid_modules,
    get_unapproved_licenses,
    get_unapproved_modules,
    is_module_approved,
)
from license_allowlist.analysis.summary import UNKNOWN_LICENSE, summarize

__all__ = [
    "UNKNOWN_LICENSE",
    "flatten_tree",
    "get_invalid_modules",
    "get_unapproved_licenses",
    "get_unapproved_modules",
    "is_module_approved",
    "normalize_license",
    "summarize",
]
