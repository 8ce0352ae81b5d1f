"""Structured diagnostics for schema walking and DTO validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Root of the dotted paths used in diagnostics
SCHEMAS_PATH = "components.schemas"


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ValidationLocation:
    """Location in the schema document where an issue was found."""

    path: str
    """Dotted path to the node (e.g., 'components.schemas.User.properties.id')."""

    def __str__(self) -> str:
        """Format location as string."""
        return self.path


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue."""

    code: str
    """Unique issue code (e.g., 'S002', 'W101')."""

    message: str
    """Human-readable message."""

    severity: ValidationSeverity
    """Severity level."""

    location: ValidationLocation | None = None
    """Location in the schema document."""

    suggestion: str | None = None
    """Suggested fix."""

    context: dict[str, Any] = field(default_factory=dict)
    """Additional context for debugging."""

    def __str__(self) -> str:
        """Format issue as string."""
        parts = [f"[{self.code}]", self.severity.value.upper(), self.message]
        if self.location:
            parts.append(f"at {self.location}")
        if self.suggestion:
            parts.append(f"(hint: {self.suggestion})")
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validation containing all issues."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return len(self.errors) == 0

    def add(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def add_error(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add an error issue."""
        self.add(
            ValidationIssue(
                code=code,
                message=message,
                severity=ValidationSeverity.ERROR,
                location=ValidationLocation(path=path),
                suggestion=suggestion,
                context=context,
            )
        )

    def add_warning(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add a warning issue."""
        self.add(
            ValidationIssue(
                code=code,
                message=message,
                severity=ValidationSeverity.WARNING,
                location=ValidationLocation(path=path),
                suggestion=suggestion,
                context=context,
            )
        )

    def merge(self, other: ValidationResult) -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)


class ErrorCodes:
    """Standard diagnostic codes."""

    # S0xx - Schema shape problems (node dropped or degraded while walking)
    S001_SCHEMA_NOT_MAPPING = "S001"
    S002_PROPERTIES_NOT_MAPPING = "S002"
    S003_PROPERTY_NOT_MAPPING = "S003"
    S004_INVALID_REQUIRED = "S004"
    S005_INVALID_ITEMS = "S005"
    S006_INVALID_REF = "S006"
    S007_NON_STRING_ENUM_VALUE = "S007"
    S008_ENUM_NOT_LIST = "S008"
    S009_UNSUPPORTED_TOP_LEVEL = "S009"
    S010_UNRECOGNIZED_TYPE = "S010"

    # W1xx - Semantic warnings on the walked DTOs
    W101_DANGLING_REFERENCE = "W101"
    W102_EMPTY_ENUM = "W102"
    W103_DUPLICATE_ENUM_VALUE = "W103"
    W104_UNKNOWN_REQUIRED_PROPERTY = "W104"
