"""Validators for data consistency checks."""

from __future__ import annotations

from collections.abc import Sequence

from dto_forge.ir.dto import DTO
from dto_forge.ir.types import EnumType
from dto_forge.validation.base import (
    BaseValidator,
    dto_path,
    iter_objects,
    iter_types,
    property_path,
)
from dto_forge.validation.errors import ErrorCodes, ValidationResult


class EnumValuesValidator(BaseValidator):
    """Validates that enums have members and no member is listed twice."""

    def validate(
        self,
        dtos: Sequence[DTO],
        result: ValidationResult,
    ) -> None:
        """Check enum DTOs and property-level enums."""
        for dto in dtos:
            if dto.is_enum:
                _check_values(dto.name, dto.enum_values, dto_path(dto), result)
                continue

            for owner, owner_path in iter_objects(dto):
                for prop in owner.properties:
                    for ir_type, path in iter_types(prop.type, property_path(owner_path, prop)):
                        if isinstance(ir_type, EnumType):
                            _check_values(ir_type.name, ir_type.values, path, result)


class RequiredPropertiesValidator(BaseValidator):
    """Validates that ``required`` only names declared properties."""

    def validate(
        self,
        dtos: Sequence[DTO],
        result: ValidationResult,
    ) -> None:
        """Check required sets against property names."""
        for dto in dtos:
            if dto.is_enum:
                continue

            for owner, owner_path in iter_objects(dto):
                declared = {prop.name for prop in owner.properties}
                for name in sorted(owner.required - declared):
                    result.add_warning(
                        code=ErrorCodes.W104_UNKNOWN_REQUIRED_PROPERTY,
                        message=f"'{name}' is required by '{owner.name}' but not declared",
                        path=f"{owner_path}.required",
                        suggestion="Add the property or remove it from 'required'",
                    )


def _check_values(
    name: str,
    values: Sequence[str],
    path: str,
    result: ValidationResult,
) -> None:
    if not values:
        result.add_warning(
            code=ErrorCodes.W102_EMPTY_ENUM,
            message=f"Enum '{name}' has no members; no value will validate",
            path=path,
        )
        return

    seen: set[str] = set()
    for value in values:
        if value in seen:
            result.add_warning(
                code=ErrorCodes.W103_DUPLICATE_ENUM_VALUE,
                message=f"Enum '{name}' lists '{value}' more than once",
                path=path,
                suggestion="Remove the duplicate member",
            )
        seen.add(value)
