"""Value types held by the custom type registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputMode(str, Enum):
    """File layout of the generated code."""

    MULTIPLE = "multiple"  # One file per DTO plus an index
    SINGLE = "single"  # All DTOs concatenated into one file


@dataclass(frozen=True)
class CustomTypeMapping:
    """How one OpenAPI ``format`` renders in a dialect.

    Attributes
    ----------
        validator_expr: Validator expression inserted verbatim
            (e.g. ``DateFromISOString``, ``z.string().uuid()``).
        scalar_type: Static TypeScript type of the validated value.
        import_statement: Import needed by ``validator_expr``, empty if none.

    """

    validator_expr: str
    scalar_type: str = "string"
    import_statement: str = ""


@dataclass(frozen=True)
class OutputConfig:
    """Where and how generated files are laid out.

    Attributes
    ----------
        folder: Default output folder when none is given by the caller.
        mode: Multiple files or a single file.
        single_file_name: File name used in single mode.

    """

    folder: str = "./generated"
    mode: OutputMode = OutputMode.MULTIPLE
    single_file_name: str = "schemas.ts"

    @property
    def is_single_file(self) -> bool:
        """True when all DTOs go into one file."""
        return self.mode == OutputMode.SINGLE


@dataclass(frozen=True)
class GenerationConfig:
    """Optional outputs toggled by configuration.

    Attributes
    ----------
        generate_package_json: Emit a package manifest when none exists.
        generate_helpers: Emit validate/is-type helper functions.
        generate_partial_codecs: Emit partial variants of object schemas.

    """

    generate_package_json: bool = True
    generate_helpers: bool = True
    generate_partial_codecs: bool = False
