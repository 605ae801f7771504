"""Custom exceptions for license-allowlist."""


class LicenseAllowlistError(Exception):
    """Base exception for all license-allowlist errors."""

    pass


class ConfigurationError(LicenseAllowlistError):
    """Exception raised when the allowlist configuration cannot be used."""

    pass


class EmptyConfigError(ConfigurationError):
    """Exception raised when the configuration file exists but is empty."""

    pass


class SchemaError(ConfigurationError):
    """Exception raised when a root level key is missing or has the wrong type."""

    pass


class DependencyTreeError(LicenseAllowlistError):
    """Exception raised when the package manager output cannot be obtained or parsed."""

    pass


class StructuralTreeError(DependencyTreeError):
    """Exception raised when a dependency tree node is malformed."""

    pass


class PromptContractError(LicenseAllowlistError):
    """Exception raised when a prompt returns an answer outside its choices."""

    pass
