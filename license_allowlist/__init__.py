"""License allowlist checker for npm dependency trees."""

__version__ = "0.1.0"
