"""Pydantic data models for license-allowlist."""

from license_allowlist.models.config import AllowlistConfig
from license_allowlist.models.module import FlatModuleMap, ModuleRecord, make_module_key
from license_allowlist.models.summary import LicenseSummary

__all__ = [
    "AllowlistConfig",
    "FlatModuleMap",
    "LicenseSummary",
    "ModuleRecord",
    "make_module_key",
]
