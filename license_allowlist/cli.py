"""CLI entry point for license-allowlist."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from license_allowlist import __version__
from license_allowlist.analysis import flatten_tree, get_invalid_modules, summarize
from license_allowlist.config import (
    DEFAULT_CONFIG_NAME,
    get_or_default_config,
    load_config_file,
    write_config,
)
from license_allowlist.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_allowlist.exceptions import LicenseAllowlistError
from license_allowlist.models.module import FlatModuleMap
from license_allowlist.output import InvalidModulesFormatter, SummaryFormatter
from license_allowlist.reconcile import ReconciliationEngine, click_prompt
from license_allowlist.resolvers import NpmTreeResolver, load_tree_file

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_CONFIG_NAME,
    show_default=True,
    help="Path to the approved licenses file.",
)
@click.option(
    "--tree-file",
    "tree_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read the dependency tree from a saved 'npm ls --json --long' file.",
)
@click.option(
    "--project-dir",
    "project_dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="npm project directory (default: current directory).",
)
@click.option(
    "--production",
    "production_flag",
    is_flag=True,
    default=False,
    help="Only check production dependencies.",
)
@click.option(
    "--summary",
    "summary_flag",
    is_flag=True,
    default=False,
    help="Print approved, unapproved and unprocessed licenses with counts.",
)
@click.option(
    "--interactive",
    "-i",
    "interactive_flag",
    is_flag=True,
    default=False,
    help="Interactively approve licenses and update the config file.",
)
@click.option(
    "--modules",
    "-m",
    "modules_flag",
    is_flag=True,
    default=False,
    help="With -i, also review individual modules.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show debug logging on stderr.",
)
def main(
    config_path: str,
    tree_file: str | None,
    project_dir: str | None,
    production_flag: bool,
    summary_flag: bool,
    interactive_flag: bool,
    modules_flag: bool,
    verbose_flag: bool,
) -> None:
    """License Allowlist - Check npm dependency licenses against an allowlist.

    Validates every module in the dependency tree against the approved
    licenses and approved modules listed in the config file.

    \b
    Examples:
        license-allowlist
        license-allowlist --summary
        license-allowlist -i
        license-allowlist -i -m
        license-allowlist --tree-file deps.json --config approved.yml
    """
    _configure_logging(verbose_flag)

    if modules_flag and not interactive_flag:
        raise click.UsageError("-m/--modules requires -i/--interactive.")
    if summary_flag and interactive_flag:
        raise click.UsageError("--summary and --interactive are mutually exclusive.")

    config_file = Path(config_path)

    try:
        if interactive_flag:
            _run_interactive(
                config_file,
                _get_modules(tree_file, project_dir, production_flag),
                modules_flag,
            )
            sys.exit(EXIT_SUCCESS)

        if not config_file.exists():
            click.echo(
                f"Config file {config_path} not found. "
                "Run with option -i to generate a config file."
            )
            sys.exit(EXIT_ERROR)

        config = load_config_file(config_file)
        modules = _get_modules(tree_file, project_dir, production_flag)

        if summary_flag:
            if not config.licenses:
                click.echo(
                    "Approved license list is empty. "
                    "Run with option -i to generate a config file."
                )
            summary = summarize(modules, config)
            click.echo(SummaryFormatter().format_summary(summary))
            sys.exit(EXIT_ISSUES if summary.has_issues else EXIT_SUCCESS)

        invalid = get_invalid_modules(modules, config)
        if invalid is None:
            click.echo(
                f"Based on your {config_path} config file, "
                "all your dependencies' licenses are valid."
            )
            sys.exit(EXIT_SUCCESS)

        InvalidModulesFormatter(console=_console).format_invalid_modules(
            invalid, config_path
        )
        click.echo(SummaryFormatter().format_summary(summarize(modules, config)))
        sys.exit(EXIT_ISSUES)

    except LicenseAllowlistError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


def _configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Show debug records instead of warnings only.
    """
    package_logger = logging.getLogger("license_allowlist")
    package_logger.handlers = [RichHandler(console=_error_console, show_path=False)]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def _get_modules(
    tree_file: Optional[str],
    project_dir: Optional[str],
    production: bool,
) -> FlatModuleMap:
    """Obtain the dependency tree and flatten it.

    Args:
        tree_file: Saved tree to read instead of running npm.
        project_dir: npm project directory.
        production: Only include production dependencies.

    Returns:
        Flattened module map.
    """
    tree: dict[str, Any]
    if tree_file is not None:
        tree = load_tree_file(tree_file)
    else:
        resolver = NpmTreeResolver(
            project_dir=Path(project_dir) if project_dir else None,
            production=production,
        )
        tree = resolver.resolve()
    return flatten_tree(tree)


def _run_interactive(
    config_file: Path,
    modules: FlatModuleMap,
    review_modules: bool,
) -> None:
    """Run the reconciliation walk and write the updated config once.

    Args:
        config_file: Config file to read (if present) and write.
        modules: Flattened module map.
        review_modules: Whether to also review individual modules.
    """
    config = get_or_default_config(config_file)
    invalid = get_invalid_modules(modules, config)

    engine = ReconciliationEngine(prompt=click_prompt)
    result = engine.reconcile(invalid, config, review_modules=review_modules)

    write_config(config_file, result.config)
    if result.quit:
        _console.print("[yellow]Review stopped early, progress saved.[/yellow]")
    _console.print(
        f"[green]Configuration written to {escape(str(config_file))}[/green]"
    )


def _display_error(error: LicenseAllowlistError) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    _error_console.print(
        f"Error: {error_type}: {error}",
        style="red bold",
        markup=False,
        soft_wrap=True,
    )


if __name__ == "__main__":
    main()
