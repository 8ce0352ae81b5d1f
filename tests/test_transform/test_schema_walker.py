"""Tests for the schema walker."""

from __future__ import annotations

from typing import Any

import pytest
from dto_forge.exceptions import SchemaRecursionError
from dto_forge.ir import (
    DTO,
    ArrayType,
    DTOKind,
    EnumType,
    ObjectType,
    PrimitiveType,
    ReferenceType,
)
from dto_forge.transform import SchemaWalker, WalkContext
from dto_forge.validation.errors import ErrorCodes, ValidationSeverity


def _codes(walker: SchemaWalker) -> list[str]:
    return [issue.code for issue in walker.diagnostics.issues]


class TestResolvePrecedence:
    """Tests for SchemaWalker.resolve."""

    def test_enum_wins_over_type(self) -> None:
        """A node with enum resolves to EnumType even when it has a type."""
        walker = SchemaWalker()
        result = walker.resolve(
            {"type": "string", "enum": ["b", "a"]}, WalkContext(name="status")
        )
        assert result == EnumType(name="StatusEnum", underlying_type="string", values=("b", "a"))

    def test_enum_default_underlying_type(self) -> None:
        """Enums without a type default to string."""
        result = SchemaWalker().resolve({"enum": ["x"]}, WalkContext(name="kind"))
        assert isinstance(result, EnumType)
        assert result.underlying_type == "string"

    def test_ref_takes_trailing_segment(self) -> None:
        """$ref resolves to the last path segment."""
        result = SchemaWalker().resolve(
            {"$ref": "#/components/schemas/Address"}, WalkContext(name="address")
        )
        assert result == ReferenceType(ref_name="Address")

    def test_ref_wins_over_type(self) -> None:
        """$ref is checked before type."""
        result = SchemaWalker().resolve(
            {"$ref": "#/components/schemas/Tag", "type": "object"}, WalkContext(name="tag")
        )
        assert result == ReferenceType(ref_name="Tag")

    def test_inline_object(self) -> None:
        """Inline objects carry a nested DTO with sorted properties."""
        result = SchemaWalker().resolve(
            {
                "type": "object",
                "required": ["zip"],
                "properties": {"zip": {"type": "string"}, "city": {"type": "string"}},
            },
            WalkContext(name="address"),
        )
        assert isinstance(result, ObjectType)
        assert result.inline_dto is not None
        assert [p.name for p in result.inline_dto.properties] == ["city", "zip"]
        assert result.inline_dto.get_property("zip").required  # type: ignore[union-attr]

    def test_array_of_refs(self) -> None:
        """Arrays resolve their items."""
        result = SchemaWalker().resolve(
            {"type": "array", "items": {"$ref": "#/components/schemas/Tag"}},
            WalkContext(name="tags"),
        )
        assert result == ArrayType(element=ReferenceType(ref_name="Tag"))

    def test_scalar_with_format(self) -> None:
        """Scalars keep their format."""
        result = SchemaWalker().resolve(
            {"type": "string", "format": "uuid"}, WalkContext(name="id")
        )
        assert result == PrimitiveType(name="string", format="uuid")

    def test_unrecognized_type_is_reported(self) -> None:
        """Unknown type strings fall back to a primitive and produce a diagnostic."""
        walker = SchemaWalker()
        result = walker.resolve({"type": "file"}, WalkContext(name="upload", path="x"))
        assert result == PrimitiveType(name="file")
        assert _codes(walker) == [ErrorCodes.S010_UNRECOGNIZED_TYPE]

    def test_missing_type_is_unknown(self) -> None:
        """A node without any usable key resolves to the unknown primitive."""
        walker = SchemaWalker()
        assert walker.resolve({}, WalkContext(name="blob")) == PrimitiveType(name="unknown")


class TestWalk:
    """Tests for SchemaWalker.walk."""

    def test_user_example(self, user_schema: dict[str, Any]) -> None:
        """The User schema becomes an object DTO with required flags set."""
        result = SchemaWalker().walk({"User": user_schema})

        assert len(result.dtos) == 1
        user = result.dtos[0]
        assert user.kind == DTOKind.OBJECT
        assert [p.name for p in user.properties] == ["age", "email", "id", "name"]
        assert {p.name for p in user.properties if p.required} == {"id", "name"}
        assert user.get_property("email").type == PrimitiveType(  # type: ignore[union-attr]
            name="string", format="email"
        )
        assert result.diagnostics.issues == []

    def test_enum_schema_becomes_enum_dto(self) -> None:
        """Top-level enum schemas become enum DTOs in declared order."""
        result = SchemaWalker().walk(
            {"Status": {"type": "string", "description": " State ", "enum": ["on", "off"]}}
        )
        status = result.dtos[0]
        assert status.is_enum
        assert status.enum_values == ("on", "off")
        assert status.description == "State"

    def test_input_order_kept(self, shop_dtos: list[DTO]) -> None:
        """DTOs come out in document order; sorting is the generator's job."""
        assert [dto.name for dto in shop_dtos] == ["User", "OrderStatus", "Order", "LineItem"]

    def test_nullable_and_property_enum(self, shop_dtos: list[DTO]) -> None:
        """nullable and property-level enums are carried into the IR."""
        order = next(dto for dto in shop_dtos if dto.name == "Order")

        note = order.get_property("note")
        assert note is not None and note.nullable and not note.required

        channel = order.get_property("channel")
        assert channel is not None
        assert channel.type == EnumType(name="ChannelEnum", values=("web", "store"))

    def test_nullable_requires_true(self) -> None:
        """Only a literal true marks a property nullable."""
        result = SchemaWalker().walk(
            {"A": {"type": "object", "properties": {"x": {"type": "string", "nullable": "yes"}}}}
        )
        assert not result.dtos[0].properties[0].nullable

    def test_non_mapping_schema_skipped_with_diagnostic(self) -> None:
        """Top-level schemas that are not mappings are reported, not dropped silently."""
        result = SchemaWalker().walk({"Broken": ["not", "a", "schema"], "Ok": {"type": "object"}})
        assert [dto.name for dto in result.dtos] == ["Ok"]
        issue = result.diagnostics.issues[0]
        assert issue.code == ErrorCodes.S001_SCHEMA_NOT_MAPPING
        assert str(issue.location) == "components.schemas.Broken"
        assert issue.severity == ValidationSeverity.ERROR
        assert not result.diagnostics.is_valid

    def test_scalar_top_level_reported(self) -> None:
        """Top-level scalars become empty objects with a warning."""
        result = SchemaWalker().walk({"Id": {"type": "string"}})
        assert result.dtos[0].properties == ()
        assert result.diagnostics.issues[0].code == ErrorCodes.S009_UNSUPPORTED_TOP_LEVEL


class TestMalformedNodes:
    """Tests for diagnostics on malformed schema nodes."""

    def _walk(self, schema: dict[str, Any]) -> tuple[DTO, list[str], list[str]]:
        result = SchemaWalker().walk({"Thing": schema})
        issues = result.diagnostics.issues
        return (
            result.dtos[0],
            [issue.code for issue in issues],
            [str(issue.location) for issue in issues],
        )

    def test_properties_not_mapping(self) -> None:
        """A list under properties is reported."""
        dto, codes, paths = self._walk({"type": "object", "properties": ["a"]})
        assert dto.properties == ()
        assert codes == [ErrorCodes.S002_PROPERTIES_NOT_MAPPING]
        assert paths == ["components.schemas.Thing.properties"]

    def test_property_not_mapping(self) -> None:
        """A scalar property schema is dropped with a diagnostic."""
        dto, codes, paths = self._walk(
            {"type": "object", "properties": {"ok": {"type": "string"}, "bad": "string"}}
        )
        assert [p.name for p in dto.properties] == ["ok"]
        assert codes == [ErrorCodes.S003_PROPERTY_NOT_MAPPING]
        assert paths == ["components.schemas.Thing.properties.bad"]

    def test_required_not_list(self) -> None:
        """A non-list required is ignored with a diagnostic."""
        dto, codes, _ = self._walk(
            {"type": "object", "required": "id", "properties": {"id": {"type": "string"}}}
        )
        assert dto.required == frozenset()
        assert codes == [ErrorCodes.S004_INVALID_REQUIRED]

    def test_required_entry_not_string(self) -> None:
        """Non-string entries in required are reported individually."""
        _, codes, paths = self._walk({"type": "object", "required": ["id", 3]})
        assert codes == [ErrorCodes.S004_INVALID_REQUIRED]
        assert paths == ["components.schemas.Thing.required[1]"]

    def test_array_without_items(self) -> None:
        """Arrays without items get unknown elements and a diagnostic."""
        dto, codes, paths = self._walk(
            {"type": "object", "properties": {"tags": {"type": "array"}}}
        )
        assert dto.properties[0].type == ArrayType(element=PrimitiveType(name="unknown"))
        assert codes == [ErrorCodes.S005_INVALID_ITEMS]
        assert paths == ["components.schemas.Thing.properties.tags.items"]

    def test_non_string_ref(self) -> None:
        """A non-string $ref is reported."""
        dto, codes, _ = self._walk({"type": "object", "properties": {"x": {"$ref": 42}}})
        assert dto.properties[0].type == PrimitiveType(name="unknown")
        assert codes == [ErrorCodes.S006_INVALID_REF]

    def test_non_string_enum_values_dropped(self) -> None:
        """Non-string enum members are dropped with one diagnostic each."""
        result = SchemaWalker().walk({"Level": {"enum": ["low", 2, None, "high"]}})
        assert result.dtos[0].enum_values == ("low", "high")
        codes = [issue.code for issue in result.diagnostics.issues]
        assert codes == [ErrorCodes.S007_NON_STRING_ENUM_VALUE] * 2

    def test_enum_not_list(self) -> None:
        """An enum that is not a list yields no members and a diagnostic."""
        result = SchemaWalker().walk({"Level": {"enum": "low"}})
        assert result.dtos[0].enum_values == ()
        assert result.diagnostics.issues[0].code == ErrorCodes.S008_ENUM_NOT_LIST

    def test_diagnostics_reset_between_walks(self) -> None:
        """Each walk starts with an empty diagnostics result."""
        walker = SchemaWalker()
        walker.walk({"Bad": 1})
        assert walker.walk({"Good": {"type": "object"}}).diagnostics.issues == []


class TestRecursionGuard:
    """Tests for inline self-reference and depth limits."""

    def test_self_containing_inline_object(self) -> None:
        """An inline schema reachable from itself is rejected with its path."""
        node: dict[str, Any] = {"type": "object", "properties": {}}
        node["properties"]["child"] = node

        with pytest.raises(SchemaRecursionError) as exc_info:
            SchemaWalker().walk({"Tree": node})

        assert exc_info.value.path == "components.schemas.Tree.properties.child"

    def test_self_containing_array(self) -> None:
        """Cycles through array items are detected too."""
        node: dict[str, Any] = {"type": "array"}
        node["items"] = node

        with pytest.raises(SchemaRecursionError):
            SchemaWalker().resolve(node, WalkContext(name="loop", path="loop"))

    def test_shared_subtree_is_not_a_cycle(self) -> None:
        """The same node used by two siblings is fine."""
        shared = {"type": "string", "format": "uuid"}
        result = SchemaWalker().walk(
            {"Pair": {"type": "object", "properties": {"a": shared, "b": shared}}}
        )
        assert len(result.dtos[0].properties) == 2

    def test_depth_limit(self) -> None:
        """Nesting beyond max_depth is rejected."""
        node: dict[str, Any] = {"type": "string"}
        for _ in range(10):
            node = {"type": "array", "items": node}

        SchemaWalker(max_depth=16).resolve(node, WalkContext(name="deep"))
        with pytest.raises(SchemaRecursionError, match="maximum depth of 5"):
            SchemaWalker(max_depth=5).resolve(node, WalkContext(name="deep"))

    def test_refs_are_never_followed(self) -> None:
        """Mutually referencing schemas walk fine because refs are not expanded."""
        result = SchemaWalker().walk(
            {
                "A": {"type": "object", "properties": {"b": {"$ref": "#/components/schemas/B"}}},
                "B": {"type": "object", "properties": {"a": {"$ref": "#/components/schemas/A"}}},
            }
        )
        assert [dto.name for dto in result.dtos] == ["A", "B"]
