"""Constants for license-allowlist."""

# Exit codes
EXIT_SUCCESS = 0  # All dependencies approved
EXIT_ISSUES = 1  # Unapproved or unprocessed modules found
EXIT_ERROR = 2  # Run failed due to error

# Default allowlist file, looked up relative to the working directory
DEFAULT_CONFIG_NAME = ".approved-licenses.yml"

# Messages shared between the config store and the CLI
EMPTY_CONFIG_MESSAGE = "Configuration file found but it is empty."
MISSING_ROOT_KEY_MESSAGE = (
    "Configuration file found but it does not have the expected "
    "root level '{key}' array."
)
