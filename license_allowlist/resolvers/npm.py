"""npm dependency tree retrieval.

Runs ``npm ls --json --long --all`` once and parses the complete output.
npm exits non-zero when the tree has problems (missing or extraneous
packages) but still prints the tree, so the exit code is only logged.
"""
from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Optional

from license_allowlist.exceptions import DependencyTreeError

logger = logging.getLogger(__name__)

NPM_EXECUTABLE = "npm"


class NpmTreeResolver:
    """Obtain the raw dependency tree of an npm project."""

    def __init__(
        self,
        project_dir: Optional[Path] = None,
        production: bool = False,
    ) -> None:
        """Initialize resolver.

        Args:
            project_dir: Project directory to run npm in. Defaults to the
                current working directory.
            production: Only include production dependencies.
        """
        self._project_dir = project_dir
        self._production = production

    @property
    def command(self) -> list[str]:
        """The npm command line that produces the tree."""
        command = [NPM_EXECUTABLE, "ls", "--json", "--long", "--all"]
        if self._production:
            command.append("--omit=dev")
        return command

    def resolve(self) -> dict[str, Any]:
        """Run npm and return the parsed dependency tree.

        Returns:
            Root node of the dependency tree.

        Raises:
            DependencyTreeError: If npm cannot be run or its output is not a
                JSON object.
        """
        logger.debug("Running %s", " ".join(self.command))
        try:
            completed = subprocess.run(
                self.command,
                cwd=self._project_dir,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise DependencyTreeError(
                f"'{NPM_EXECUTABLE}' executable not found: {e}"
            ) from e
        except OSError as e:
            raise DependencyTreeError(f"Cannot run '{NPM_EXECUTABLE}': {e}") from e

        if completed.returncode != 0:
            logger.warning(
                "npm ls exited with code %d: %s",
                completed.returncode,
                completed.stderr.strip(),
            )
        return parse_tree(completed.stdout, source="npm ls")


def load_tree_file(path: Path | str) -> dict[str, Any]:
    """Load a dependency tree previously saved from ``npm ls --json --long``.

    Args:
        path: Path to the JSON file.

    Returns:
        Root node of the dependency tree.

    Raises:
        DependencyTreeError: If the file cannot be read or is not a JSON object.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DependencyTreeError(f"Cannot read dependency tree '{path}': {e}") from e
    return parse_tree(content, source=str(path))


def parse_tree(output: str, source: str) -> dict[str, Any]:
    """Parse package manager output into a dependency tree.

    Args:
        output: Complete JSON text.
        source: Where the text came from, for error messages.

    Returns:
        Root node of the dependency tree.

    Raises:
        DependencyTreeError: If the text is empty, invalid JSON, or not an
            object at root level.
    """
    if not output.strip():
        raise DependencyTreeError(f"No dependency tree returned by {source}")
    try:
        tree = json.loads(output)
    except json.JSONDecodeError as e:
        raise DependencyTreeError(
            f"Invalid dependency tree JSON from {source}: {e}"
        ) from e
    if not isinstance(tree, dict):
        raise DependencyTreeError(
            f"Invalid dependency tree from {source}: "
            f"expected an object at root level, got {type(tree).__name__}"
        )
    return tree
