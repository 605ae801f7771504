"""Tests for custom exceptions."""

import pytest

from license_allowlist.exceptions import (
    ConfigurationError,
    DependencyTreeError,
    EmptyConfigError,
    LicenseAllowlistError,
    PromptContractError,
    SchemaError,
    StructuralTreeError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_base_error_is_exception(self) -> None:
        """Test that LicenseAllowlistError inherits from Exception."""
        assert issubclass(LicenseAllowlistError, Exception)

    def test_config_errors_inherit_from_configuration_error(self) -> None:
        """Test that empty and schema errors are configuration errors."""
        assert issubclass(EmptyConfigError, ConfigurationError)
        assert issubclass(SchemaError, ConfigurationError)

    def test_structural_error_is_tree_error(self) -> None:
        """Test that StructuralTreeError inherits from DependencyTreeError."""
        assert issubclass(StructuralTreeError, DependencyTreeError)

    def test_schema_error_is_not_empty_error(self) -> None:
        """Test that the two config errors stay distinguishable."""
        assert not issubclass(SchemaError, EmptyConfigError)
        assert not issubclass(EmptyConfigError, SchemaError)

    @pytest.mark.parametrize(
        "exc_type",
        [
            ConfigurationError,
            EmptyConfigError,
            SchemaError,
            DependencyTreeError,
            StructuralTreeError,
            PromptContractError,
        ],
    )
    def test_all_exceptions_catchable_by_base(self, exc_type: type) -> None:
        """Test that all custom exceptions can be caught by the base class."""
        with pytest.raises(LicenseAllowlistError) as exc_info:
            raise exc_type("boom")
        assert str(exc_info.value) == "boom"
