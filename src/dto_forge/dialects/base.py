"""Dialect description record.

A dialect is the lexicon of one validation library. The generator is
shared; everything library-specific is looked up here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from dto_forge.registry.mappings import CustomTypeMapping
from dto_forge.transform.naming import quote_literal

# Primitive names every dialect lexicon must cover
PRIMITIVE_KEYS = ("string", "number", "integer", "boolean", "unknown")


@dataclass(frozen=True)
class Dialect:
    """Validation-library lexicon.

    Templates are ``str.format`` patterns; the placeholder names are given
    next to each attribute.

    Attributes
    ----------
        name: Language name used on the command line and in config sections.
        description: Human-readable library name.
        symbol_suffix: Suffix appended to a DTO name to form its validator symbol.
        base_import: Import of the validation library, always emitted first.
        primitives: Validator per primitive key (see ``PRIMITIVE_KEYS``).
        array_template: ``{element}``.
        enum_template: ``{members}``.
        enum_member_template: ``{literal}``.
        record_expr: Validator for inline objects that are not expanded.
        object_call: Call wrapping an object's field block.
        nullable_template: ``{expr}``.
        optional_template: ``{expr}``.
        unknown_format_template: ``{expr}``, ``{format}``.
        static_type_template: ``{symbol}``.
        partial_template: ``{symbol}``.
        validate_template: ``{symbol}``, evaluated against ``data``.
        guard_template: ``{symbol}``, boolean check against ``data``.
        default_mappings: Built-in format mappings.
        example_mappings: Mappings written to the example config.
        package_dependencies: Runtime dependencies for the package manifest.
        default_package_name: Package name when none is configured.
        file_extension: Extension of generated modules.

    """

    name: str
    description: str
    symbol_suffix: str
    base_import: str
    primitives: Mapping[str, str]
    array_template: str
    enum_template: str
    enum_member_template: str
    record_expr: str
    object_call: str
    nullable_template: str
    optional_template: str
    unknown_format_template: str
    static_type_template: str
    partial_template: str
    validate_template: str
    guard_template: str
    default_mappings: Mapping[str, CustomTypeMapping]
    example_mappings: Mapping[str, CustomTypeMapping]
    package_dependencies: Mapping[str, str]
    default_package_name: str
    file_extension: str = ".ts"

    def __post_init__(self) -> None:
        """Freeze mapping attributes and check the primitive lexicon."""
        missing = [key for key in PRIMITIVE_KEYS if key not in self.primitives]
        if missing:
            raise ValueError(f"dialect '{self.name}' lacks primitives: {', '.join(missing)}")
        for attr in ("primitives", "default_mappings", "example_mappings", "package_dependencies"):
            object.__setattr__(self, attr, MappingProxyType(dict(getattr(self, attr))))

    def symbol(self, name: str) -> str:
        """Validator symbol for a DTO name."""
        return f"{name}{self.symbol_suffix}"

    def partial_symbol(self, name: str) -> str:
        """Validator symbol of the partial variant of a DTO."""
        return f"{name}Partial{self.symbol_suffix}"

    def enum_expr(self, values: Sequence[str]) -> str:
        """Closed literal-set validator over ``values`` in the given order."""
        members = ", ".join(
            self.enum_member_template.format(literal=quote_literal(value)) for value in values
        )
        return self.enum_template.format(members=members)
