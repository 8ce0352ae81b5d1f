"""IR models for DTOs and their properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dto_forge.ir.types import IRType


class DTOKind(str, Enum):
    """Shape of a generated unit."""

    OBJECT = "object"
    ENUM = "enum"


@dataclass(frozen=True)
class Property:
    """A field within an object DTO.

    Attributes
    ----------
        name: Property name as written in the schema.
        type: Resolved IR type.
        description: Human-readable description.
        nullable: Whether ``null`` is accepted in addition to the type.
        required: Whether the owning object lists the property as required.

    """

    name: str
    type: IRType
    description: str = ""
    nullable: bool = False
    required: bool = False


@dataclass(frozen=True)
class DTO:
    """A named unit corresponding to one schema definition.

    Properties are kept sorted by name regardless of input order, since
    mapping order in the source document carries no meaning.

    Attributes
    ----------
        name: Unique name within one generation run.
        kind: Object or enum.
        description: Human-readable description.
        properties: Object properties, sorted by name.
        required: Names of required properties.
        enum_values: Enum members in declaration order.

    """

    name: str
    kind: DTOKind = DTOKind.OBJECT
    description: str = ""
    properties: tuple[Property, ...] = ()
    required: frozenset[str] = frozenset()
    enum_values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalise ordering of properties."""
        object.__setattr__(
            self,
            "properties",
            tuple(sorted(self.properties, key=lambda prop: prop.name)),
        )
        object.__setattr__(self, "required", frozenset(self.required))

    @property
    def is_enum(self) -> bool:
        """True for enum DTOs."""
        return self.kind == DTOKind.ENUM

    def get_property(self, name: str) -> Property | None:
        """Look up a property by name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None
