"""Base validator class and traversal helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import assert_never

from dto_forge.ir.dto import DTO, Property
from dto_forge.ir.types import (
    ArrayType,
    EnumType,
    IRType,
    ObjectType,
    PrimitiveType,
    ReferenceType,
)
from dto_forge.validation.errors import SCHEMAS_PATH, ValidationResult


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        dtos: Sequence[DTO],
        result: ValidationResult,
    ) -> None:
        """Validate the DTOs and add issues to result.

        Args:
        ----
            dtos: The DTOs produced by the schema walker.
            result: The result object to add issues to.

        """
        ...


class CompositeValidator(BaseValidator):
    """Combines multiple validators."""

    def __init__(self, validators: list[BaseValidator] | None = None) -> None:
        """Initialize with optional list of validators.

        Args:
        ----
            validators: List of validators to combine.

        """
        self.validators = validators or []

    def add(self, validator: BaseValidator) -> None:
        """Add a validator.

        Args:
        ----
            validator: Validator to add.

        """
        self.validators.append(validator)

    def validate(
        self,
        dtos: Sequence[DTO],
        result: ValidationResult,
    ) -> None:
        """Run all validators.

        Args:
        ----
            dtos: The DTOs to validate.
            result: The result object to add issues to.

        """
        for validator in self.validators:
            validator.validate(dtos, result)


def dto_path(dto: DTO) -> str:
    """Dotted path of a top-level DTO."""
    return f"{SCHEMAS_PATH}.{dto.name}"


def iter_objects(dto: DTO, path: str | None = None) -> Iterator[tuple[DTO, str]]:
    """Yield an object DTO and every inline object nested in it, with paths."""
    path = path or dto_path(dto)
    yield dto, path
    for prop in dto.properties:
        for ir_type, type_path in iter_types(prop.type, property_path(path, prop)):
            if isinstance(ir_type, ObjectType) and ir_type.inline_dto is not None:
                yield from iter_objects(ir_type.inline_dto, type_path)


def iter_types(ir_type: IRType, path: str) -> Iterator[tuple[IRType, str]]:
    """Yield an IR type and the element types of arrays below it, with paths.

    Inline object properties are not entered; use ``iter_objects`` for those.
    """
    yield ir_type, path
    match ir_type:
        case ArrayType(element=element):
            yield from iter_types(element, f"{path}.items")
        case PrimitiveType() | ReferenceType() | EnumType() | ObjectType():
            pass
        case _:
            assert_never(ir_type)


def property_path(owner_path: str, prop: Property) -> str:
    """Dotted path of a property inside its owning object."""
    return f"{owner_path}.properties.{prop.name}"
