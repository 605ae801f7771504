"""Shared fixtures for license-allowlist tests."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def npm_tree() -> dict[str, Any]:
    """Provide an ``npm ls --json --long`` style tree with a diamond.

    ``shared@1.0.0`` is reachable from both ``left`` and ``right``.
    """
    shared = {"name": "shared", "version": "1.0.0", "license": "ISC"}
    return {
        "name": "my-app",
        "version": "0.0.1",
        "dependencies": {
            "left": {
                "name": "left",
                "version": "2.0.0",
                "license": "MIT",
                "dependencies": {"shared": shared},
            },
            "right": {
                "name": "right",
                "version": "3.1.0",
                "license": "CC-BY-3.0",
                "dependencies": {"shared": shared},
            },
            "cc0": {"name": "cc0", "version": "1.0.0", "license": "CC0-1.0"},
            "bare": {"name": "bare", "version": "0.1.0"},
        },
    }


@pytest.fixture
def tree_file(tmp_path: Path, npm_tree: dict[str, Any]) -> Path:
    """Write the npm tree fixture to a JSON file."""
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(npm_tree), encoding="utf-8")
    return path
