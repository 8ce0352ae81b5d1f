"""Tests for diagnostics formatting."""

from io import StringIO

import pytest
from dto_forge.cli.error_formatter import ErrorFormatter, ErrorTable
from dto_forge.validation.errors import ValidationResult
from rich.console import Console


@pytest.fixture
def string_console() -> Console:
    """Create a console that writes to a string."""
    return Console(file=StringIO(), width=120)


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[union-attr]


class TestErrorFormatter:
    """Tests for ErrorFormatter."""

    def test_format_empty_result(self, string_console: Console) -> None:
        """Should show success for empty result."""
        ErrorFormatter(string_console).format_validation_result(ValidationResult())
        assert "No schema problems found" in _output(string_console)

    def test_format_with_errors(self, string_console: Console) -> None:
        """Should show code, message, location and the error count."""
        result = ValidationResult()
        result.add_error("S001", "Schema 'Pet' is not a mapping", "components.schemas.Pet")

        ErrorFormatter(string_console).format_validation_result(result)

        output = _output(string_console)
        assert "Schema Problems" in output
        assert "[S001]" in output
        assert "Schema 'Pet' is not a mapping" in output
        assert "at components.schemas.Pet" in output
        assert "Errors: 1" in output

    def test_format_with_warnings(self, string_console: Console) -> None:
        """Should show warnings with their suggestion."""
        result = ValidationResult()
        result.add_warning(
            "W101",
            "Reference to undefined schema 'Owner'",
            "components.schemas.Pet.properties.owner",
            suggestion="Did you mean 'owner'?",
        )

        ErrorFormatter(string_console).format_validation_result(result)

        output = _output(string_console)
        assert "Schema Warnings" in output
        assert "WARNING" in output
        assert "Did you mean 'owner'?" in output


class TestErrorTable:
    """Tests for ErrorTable."""

    def test_table(self, string_console: Console) -> None:
        """Every issue becomes a row."""
        result = ValidationResult()
        result.add_error("S006", "Invalid $ref", "components.schemas.A")
        result.add_warning("W102", "Enum 'E' has no members", "components.schemas.E")

        ErrorTable(string_console).print_result(result)

        output = _output(string_console)
        assert "Schema Diagnostics" in output
        assert "S006" in output
        assert "W102" in output
