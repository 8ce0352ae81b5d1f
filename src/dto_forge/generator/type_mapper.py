"""Map IR types to validator expressions of a dialect.

Rendering rules (base expression, before modifiers):

    string, no format          -> string validator
    string, registered format  -> registry validator expression verbatim
    string, unknown format     -> string validator plus a format comment
    number / integer           -> numeric validator
    boolean                    -> boolean validator
    other primitive            -> unknown validator
    Array(elem)                -> array of map(elem)
    Reference(name)            -> name + dialect suffix
    Enum(values)               -> closed literal set
    Object(ref)                -> ref + dialect suffix
    Object(inline)             -> untyped record validator

Modifiers wrap the base expression: nullable first, then optional.
"""

from __future__ import annotations

from typing import assert_never

from dto_forge.dialects.base import Dialect
from dto_forge.ir.dto import DTO, Property
from dto_forge.ir.types import (
    ArrayType,
    EnumType,
    IRType,
    ObjectType,
    PrimitiveType,
    ReferenceType,
)
from dto_forge.registry.custom_types import CustomTypeRegistry
from dto_forge.transform.naming import comment_text, quote_literal

# Static TypeScript types of the built-in primitives
_STATIC_PRIMITIVES = {
    "string": "string",
    "number": "number",
    "integer": "number",
    "boolean": "boolean",
}


class TypeMapper:
    """Render IR types with one dialect and one frozen registry."""

    def __init__(self, dialect: Dialect, registry: CustomTypeRegistry) -> None:
        """Initialize the mapper.

        Args:
        ----
            dialect: Validation-library lexicon.
            registry: Format mappings consulted for primitives with a format.

        """
        self.dialect = dialect
        self.registry = registry

    def expression(self, ir_type: IRType) -> str:
        """Base validator expression for an IR type."""
        match ir_type:
            case PrimitiveType():
                return self._primitive(ir_type)
            case ArrayType(element=element):
                return self.dialect.array_template.format(element=self.expression(element))
            case ReferenceType(ref_name=name):
                return self.dialect.symbol(name)
            case EnumType(values=values):
                return self.dialect.enum_expr(values)
            case ObjectType(ref_name=name) if name:
                return self.dialect.symbol(name)
            case ObjectType():
                return self.dialect.record_expr
            case _:
                assert_never(ir_type)

    def property_expression(self, prop: Property) -> str:
        """Validator expression for a property with its modifiers applied."""
        expr = self.expression(prop.type)
        if prop.nullable:
            expr = self.dialect.nullable_template.format(expr=expr)
        if not prop.required:
            expr = self.dialect.optional_template.format(expr=expr)
        return expr

    def static_type(self, ir_type: IRType) -> str:
        """Static TypeScript type of values accepted by an IR type."""
        match ir_type:
            case PrimitiveType(name=name, format=fmt):
                mapping = self.registry.get(fmt) if name == "string" else None
                if mapping is not None:
                    return mapping.scalar_type
                return _STATIC_PRIMITIVES.get(name, "unknown")
            case ArrayType(element=element):
                return f"Array<{self.static_type(element)}>"
            case ReferenceType(ref_name=name):
                return name
            case EnumType(values=values):
                return " | ".join(quote_literal(value) for value in values) or "never"
            case ObjectType(ref_name=name) if name:
                return name
            case ObjectType():
                return "Record<string, unknown>"
            case _:
                assert_never(ir_type)

    def property_static_type(self, prop: Property) -> str:
        """Static type of a property including ``null`` when nullable."""
        static = self.static_type(prop.type)
        return f"{static} | null" if prop.nullable else static

    def _primitive(self, ir_type: PrimitiveType) -> str:
        if not ir_type.is_known:
            return self.dialect.primitives["unknown"]

        expr = self.dialect.primitives[ir_type.name]
        if ir_type.name != "string" or not ir_type.format:
            return expr

        mapping = self.registry.get(ir_type.format)
        if mapping is not None:
            return mapping.validator_expr
        return self.dialect.unknown_format_template.format(
            expr=expr, format=comment_text(ir_type.format)
        )


def used_formats(dto: DTO) -> set[str]:
    """Formats of string primitives reachable from a DTO's properties.

    Array elements are followed to any depth. Inline objects are rendered
    as untyped records, so their properties contribute nothing.
    """
    formats: set[str] = set()
    for prop in dto.properties:
        _collect_formats(prop.type, formats)
    return formats


def referenced_names(dto: DTO) -> set[str]:
    """Names of other DTOs whose validators a DTO's rendering uses."""
    names: set[str] = set()
    for prop in dto.properties:
        _collect_references(prop.type, names)
    names.discard(dto.name)
    return names


def _collect_formats(ir_type: IRType, formats: set[str]) -> None:
    match ir_type:
        case PrimitiveType(name="string", format=fmt):
            if fmt:
                formats.add(fmt)
        case PrimitiveType():
            pass
        case ArrayType(element=element):
            _collect_formats(element, formats)
        case ReferenceType() | EnumType() | ObjectType():
            pass
        case _:
            assert_never(ir_type)


def _collect_references(ir_type: IRType, names: set[str]) -> None:
    match ir_type:
        case ReferenceType(ref_name=name):
            names.add(name)
        case ObjectType(ref_name=name) if name:
            names.add(name)
        case ArrayType(element=element):
            _collect_references(element, names)
        case PrimitiveType() | EnumType() | ObjectType():
            pass
        case _:
            assert_never(ir_type)
