"""Tests for allowlist configuration writing."""
from __future__ import annotations

import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from license_allowlist.config.loader import load_config_file
from license_allowlist.config.writer import dump_config, write_config
from license_allowlist.exceptions import ConfigurationError
from license_allowlist.models.config import AllowlistConfig


class TestDumpConfig:
    """Tests for dump_config function."""

    def test_block_list_and_empty_list(self) -> None:
        """Test the exact layout of a simple config."""
        config = AllowlistConfig(licenses=["MIT"], modules=[])

        assert dump_config(config) == "licenses:\n  - MIT\nmodules: []\n"

    def test_both_empty(self) -> None:
        """Test that empty lists are written as [] rather than omitted."""
        assert dump_config(AllowlistConfig()) == "licenses: []\nmodules: []\n"

    def test_preserves_order_and_compound_expressions(self) -> None:
        """Test that entries keep their order and stay unquoted."""
        config = AllowlistConfig(
            licenses=["ISC", "MIT", "(MIT OR CC0-1.0)", "(MIT AND CC-BY-3.0)"],
            modules=["spdx-license-ids@3.0.3"],
        )

        assert dump_config(config) == (
            "licenses:\n"
            "  - ISC\n"
            "  - MIT\n"
            "  - (MIT OR CC0-1.0)\n"
            "  - (MIT AND CC-BY-3.0)\n"
            "modules:\n"
            "  - spdx-license-ids@3.0.3\n"
        )


class TestWriteConfig:
    """Tests for write_config function."""

    def test_writes_file(self, tmp_path: Path) -> None:
        """Test that the serialized config lands on disk."""
        path = tmp_path / ".approved-licenses.yml"

        write_config(path, AllowlistConfig(licenses=["MIT"], modules=[]))
        assert path.read_text(encoding="utf-8") == "licenses:\n  - MIT\nmodules: []\n"

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        """Test that an existing file is overwritten."""
        path = tmp_path / ".approved-licenses.yml"
        path.write_text("licenses: []\nmodules: []\n", encoding="utf-8")

        write_config(path, AllowlistConfig(licenses=["ISC"], modules=["a@1.0.0"]))
        assert load_config_file(path) == AllowlistConfig(
            licenses=["ISC"], modules=["a@1.0.0"]
        )

    def test_keeps_existing_permissions(self, tmp_path: Path) -> None:
        """Test that rewriting a file does not widen its permissions."""
        path = tmp_path / ".approved-licenses.yml"
        path.write_text("licenses: []\nmodules: []\n", encoding="utf-8")
        path.chmod(0o600)

        write_config(path, AllowlistConfig(licenses=["MIT"]))
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_new_file_permissions(self, tmp_path: Path) -> None:
        """Test that a new file is created readable by everyone."""
        path = tmp_path / ".approved-licenses.yml"

        write_config(path, AllowlistConfig(licenses=["MIT"]))
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_leaves_no_temp_files(self, tmp_path: Path) -> None:
        """Test that only the config file remains after writing."""
        path = tmp_path / ".approved-licenses.yml"

        write_config(path, AllowlistConfig(licenses=["MIT"]))
        assert [p.name for p in tmp_path.iterdir()] == [path.name]

    def test_failed_replace_keeps_original(self, tmp_path: Path) -> None:
        """Test that a failed write leaves the old file untouched."""
        path = tmp_path / ".approved-licenses.yml"
        path.write_text("licenses:\n  - MIT\nmodules: []\n", encoding="utf-8")

        with patch(
            "license_allowlist.config.writer.os.replace",
            side_effect=OSError("disk full"),
        ):
            with pytest.raises(ConfigurationError) as exc_info:
                write_config(path, AllowlistConfig(licenses=["ISC"]))

        assert "Cannot write configuration file" in str(exc_info.value)
        assert path.read_text(encoding="utf-8") == "licenses:\n  - MIT\nmodules: []\n"
        assert [p.name for p in tmp_path.iterdir()] == [path.name]

    def test_missing_directory_raises_error(self, tmp_path: Path) -> None:
        """Test that writing into a missing directory fails cleanly."""
        with pytest.raises(ConfigurationError):
            write_config(tmp_path / "missing" / "config.yml", AllowlistConfig())


class TestRoundTrip:
    """Tests that written configs load back unchanged."""

    @pytest.mark.parametrize(
        "config",
        [
            AllowlistConfig(),
            AllowlistConfig(licenses=["MIT"], modules=[]),
            AllowlistConfig(licenses=[], modules=["left-pad@1.3.0"]),
            AllowlistConfig(
                licenses=["Apache-2.0", "(MIT OR CC0-1.0)", "BSD-3-Clause"],
                modules=["@scope/pkg@2.0.0-beta.1", "spdx-license-ids@3.0.3"],
            ),
        ],
    )
    def test_write_then_load(self, tmp_path: Path, config: AllowlistConfig) -> None:
        """Test the write/load round-trip law."""
        path = tmp_path / ".approved-licenses.yml"

        write_config(path, config)
        assert load_config_file(path) == config
