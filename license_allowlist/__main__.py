"""Allow running as ``python -m license_allowlist``."""
from license_allowlist.cli import main

main()
