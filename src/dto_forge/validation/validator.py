"""Main validator combining all DTO checks."""

from __future__ import annotations

from collections.abc import Sequence

from dto_forge.exceptions import DtoForgeError
from dto_forge.ir.dto import DTO
from dto_forge.validation.base import CompositeValidator
from dto_forge.validation.consistency_validators import (
    EnumValuesValidator,
    RequiredPropertiesValidator,
)
from dto_forge.validation.errors import ValidationResult
from dto_forge.validation.reference_validators import DanglingReferenceValidator


class DtoValidator:
    """Semantic checks on walked DTOs.

    Combines reference validators (cross-DTO checks) and consistency
    validators (checks within one DTO).
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize validator.

        Args:
        ----
            strict: If True, treat warnings as errors.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            [
                # Reference validators
                DanglingReferenceValidator(),
                # Consistency validators
                EnumValuesValidator(),
                RequiredPropertiesValidator(),
            ]
        )

    def validate(self, dtos: Sequence[DTO]) -> ValidationResult:
        """Validate a batch of DTOs.

        Args:
        ----
            dtos: The DTOs to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(dtos, result)
        return result

    def check(self, result: ValidationResult) -> None:
        """Raise if a result fails under the current strictness.

        Args:
        ----
            result: Diagnostics from walking and validation.

        Raises:
        ------
            DiagnosticsError: On errors, or on warnings in strict mode.

        """
        if not result.is_valid or (self.strict and result.warnings):
            raise DiagnosticsError(result)

    def validate_and_raise(self, dtos: Sequence[DTO]) -> ValidationResult:
        """Validate and raise if the result fails.

        Args:
        ----
            dtos: The DTOs to validate.

        Returns:
        -------
            The validation result when it passes.

        Raises:
        ------
            DiagnosticsError: On errors, or on warnings in strict mode.

        """
        result = self.validate(dtos)
        self.check(result)
        return result


class DiagnosticsError(DtoForgeError):
    """Raised when diagnostics block generation."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Validation failed: {', '.join(parts)}"
        super().__init__(message)

    def format_issues(self) -> str:
        """Format all issues as a string.

        Returns
        -------
            Formatted string with all issues.

        """
        lines = []

        for issue in self.result.errors:
            lines.append(f"ERROR: {issue}")

        for issue in self.result.warnings:
            lines.append(f"WARNING: {issue}")

        return "\n".join(lines)
