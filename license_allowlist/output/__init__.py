"""Output formatters for license-allowlist."""

from license_allowlist.output.summary import SummaryFormatter
from license_allowlist.output.terminal import InvalidModulesFormatter

__all__ = [
    "InvalidModulesFormatter",
    "SummaryFormatter",
]
