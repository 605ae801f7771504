"""Terminal output formatter using Rich."""
from typing import Mapping, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from license_allowlist.models.module import ModuleRecord


class InvalidModulesFormatter:
    """Format unapproved modules for terminal display using Rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_invalid_modules(
        self,
        invalid_modules: Mapping[str, ModuleRecord],
        config_name: str,
    ) -> None:
        """Display unapproved modules as a Rich table.

        Module keys and licenses come from package metadata and are
        escaped, so brackets in them print literally.

        Args:
            invalid_modules: Unapproved modules keyed by name@version.
            config_name: Config file name shown in the hint line.
        """
        table = Table(title="Unapproved Modules")
        table.add_column("Module", style="cyan", no_wrap=True)
        table.add_column("License", style="red")

        for key, record in invalid_modules.items():
            license_display = (
                escape(record.licenses)
                if record.licenses
                else "[yellow]Unprocessed[/yellow]"
            )
            table.add_row(escape(key), license_display)

        self._console.print(table)
        self._console.print(
            f"\n[bold]Unapproved modules:[/bold] {len(invalid_modules)}"
        )
        self._console.print(
            f"Based on your {escape(config_name)} config file, these modules are "
            "not approved. Run with option -i to review them."
        )
