"""IR type variants for resolved schema shapes.

Every resolved schema node becomes exactly one of the variants below.
``IRType`` is their closed union: consumers dispatch with ``match`` and
end with ``assert_never`` so a type checker reports any variant that a
new schema shape leaves unhandled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias, Union

if TYPE_CHECKING:
    from dto_forge.ir.dto import DTO

# OpenAPI scalar type names understood by the generators
SCALAR_TYPES = frozenset({"string", "number", "integer", "boolean"})

# Name used when a node has no usable ``type``
UNKNOWN_TYPE = "unknown"


@dataclass(frozen=True)
class PrimitiveType:
    """A scalar value.

    Attributes
    ----------
        name: OpenAPI type name (string, number, integer, boolean) or the raw
            unrecognised type string, ``unknown`` when absent.
        format: Optional refinement tag such as ``uuid`` or ``date-time``.

    """

    name: str
    format: str = ""

    @property
    def type_name(self) -> str:
        """Display name."""
        return self.name

    @property
    def is_known(self) -> bool:
        """True for the scalar types the generators have a validator for."""
        return self.name in SCALAR_TYPES


@dataclass(frozen=True)
class ObjectType:
    """A nested object, either a named reference or an inline shape.

    Attributes
    ----------
        ref_name: Name of a DTO defined elsewhere in the batch.
        inline_dto: The unexpanded inline object shape.

    """

    ref_name: str | None = None
    inline_dto: DTO | None = None

    @property
    def type_name(self) -> str:
        """Display name."""
        if self.ref_name:
            return self.ref_name
        if self.inline_dto is not None:
            return self.inline_dto.name
        return "object"


@dataclass(frozen=True)
class ArrayType:
    """An array of elements of a single IR type."""

    element: IRType

    @property
    def type_name(self) -> str:
        """Display name derived from the element."""
        return f"Array<{self.element.type_name}>"


@dataclass(frozen=True)
class ReferenceType:
    """A ``$ref`` to a DTO defined in the same batch.

    The target is not checked for existence here.
    """

    ref_name: str

    @property
    def type_name(self) -> str:
        """Display name."""
        return self.ref_name


@dataclass(frozen=True)
class EnumType:
    """A closed set of literal values.

    Attributes
    ----------
        name: Generated name (``<Property>Enum`` for property-level enums).
        underlying_type: Schema type of the members, ``string`` by default.
        values: Members in declaration order.

    """

    name: str
    underlying_type: str = "string"
    values: tuple[str, ...] = ()

    @property
    def type_name(self) -> str:
        """Display name."""
        return self.name


IRType: TypeAlias = Union[PrimitiveType, ObjectType, ArrayType, ReferenceType, EnumType]
