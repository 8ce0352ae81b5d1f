"""Intermediate Representation (IR) models for schema to code generation.

The IR sits between raw OpenAPI schema nodes and generated source:

1. Resolves each schema node to exactly one closed type variant
2. Keeps ``$ref`` targets as names instead of expanding them
3. Orders object properties deterministically
4. Uses frozen dataclasses so DTOs are immutable once built
"""

from dto_forge.ir.dto import DTO, DTOKind, Property
from dto_forge.ir.types import (
    SCALAR_TYPES,
    UNKNOWN_TYPE,
    ArrayType,
    EnumType,
    IRType,
    ObjectType,
    PrimitiveType,
    ReferenceType,
)

__all__ = [
    # Types
    "IRType",
    "PrimitiveType",
    "ObjectType",
    "ArrayType",
    "ReferenceType",
    "EnumType",
    "SCALAR_TYPES",
    "UNKNOWN_TYPE",
    # DTOs
    "DTO",
    "DTOKind",
    "Property",
]
