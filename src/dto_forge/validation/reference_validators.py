"""Validators for references between DTOs."""

from __future__ import annotations

from collections.abc import Sequence

from dto_forge.ir.dto import DTO
from dto_forge.ir.types import ObjectType, ReferenceType
from dto_forge.validation.base import BaseValidator, iter_objects, iter_types, property_path
from dto_forge.validation.errors import ErrorCodes, ValidationResult


class DanglingReferenceValidator(BaseValidator):
    """Validates that every ``$ref`` names a DTO of the same batch.

    Dangling references still render as ``<Name><suffix>``; the generated
    module then fails to compile unless the symbol is provided elsewhere.
    """

    def validate(
        self,
        dtos: Sequence[DTO],
        result: ValidationResult,
    ) -> None:
        """Check that all referenced names are defined."""
        defined = {dto.name for dto in dtos}

        for dto in dtos:
            for owner, owner_path in iter_objects(dto):
                for prop in owner.properties:
                    for ir_type, path in iter_types(prop.type, property_path(owner_path, prop)):
                        target = _reference_target(ir_type)
                        if target is None or target in defined:
                            continue
                        result.add_warning(
                            code=ErrorCodes.W101_DANGLING_REFERENCE,
                            message=f"Reference to undefined schema '{target}'",
                            path=path,
                            suggestion=_suggest(target, defined),
                            reference=target,
                        )


def _reference_target(ir_type: object) -> str | None:
    if isinstance(ir_type, ReferenceType):
        return ir_type.ref_name
    if isinstance(ir_type, ObjectType) and ir_type.ref_name:
        return ir_type.ref_name
    return None


def _suggest(target: str, defined: set[str]) -> str:
    lowered = target.lower()
    for name in sorted(defined):
        if name.lower() == lowered:
            return f"Did you mean '{name}'?"
    return "Define the schema under components.schemas or fix the $ref"
