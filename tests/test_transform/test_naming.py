"""Tests for naming helpers."""

from __future__ import annotations

import pytest
from dto_forge.transform.naming import (
    comment_text,
    enum_type_name,
    property_key,
    quote_literal,
    ref_name,
    to_kebab_case,
    to_pascal_case,
)


class TestCaseConversion:
    """Tests for case conversions."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("User", "user"),
            ("UserProfile", "user-profile"),
            ("LineItem", "line-item"),
            ("APIKey", "a-p-i-key"),
            ("order", "order"),
        ],
    )
    def test_kebab_case(self, name: str, expected: str) -> None:
        """Every inner uppercase letter starts a new hyphenated word."""
        assert to_kebab_case(name) == expected

    def test_pascal_case(self) -> None:
        """Only the first character changes."""
        assert to_pascal_case("userId") == "UserId"
        assert to_pascal_case("") == ""


class TestNames:
    """Tests for generated names."""

    def test_enum_type_name(self) -> None:
        """Property-level enums are named after the property."""
        assert enum_type_name("status") == "StatusEnum"

    def test_ref_name(self) -> None:
        """The trailing pointer segment is the name."""
        assert ref_name("#/components/schemas/Pet") == "Pet"
        assert ref_name("Pet") == "Pet"


class TestLiterals:
    """Tests for TypeScript literal rendering."""

    def test_quote_literal_escapes(self) -> None:
        """Quotes and backslashes are escaped."""
        assert quote_literal("it's") == "'it\\'s'"
        assert quote_literal("a\\b") == "'a\\\\b'"

    def test_property_key(self) -> None:
        """Identifiers stay bare, everything else is quoted."""
        assert property_key("firstName") == "firstName"
        assert property_key("$meta") == "$meta"
        assert property_key("first-name") == "'first-name'"
        assert property_key("2fa") == "'2fa'"

    def test_comment_text_breaks_terminators(self) -> None:
        """Block-comment terminators are split, other text is untouched."""
        assert comment_text("e.g. src/**/*.ts") == "e.g. src/**\\/*.ts"
        assert comment_text("a */ b */") == "a *\\/ b *\\/"
        assert comment_text("/* plain * text /") == "/* plain * text /"
