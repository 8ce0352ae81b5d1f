"""Diagnostics for schema walking and semantic checks on DTOs."""

from __future__ import annotations

from dto_forge.validation.errors import (
    SCHEMAS_PATH,
    ErrorCodes,
    ValidationIssue,
    ValidationLocation,
    ValidationResult,
    ValidationSeverity,
)

__all__ = [
    "SCHEMAS_PATH",
    "ErrorCodes",
    "ValidationIssue",
    "ValidationLocation",
    "ValidationResult",
    "ValidationSeverity",
]
