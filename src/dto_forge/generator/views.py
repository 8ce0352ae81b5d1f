"""Template view models for rendered DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldView:
    """One property of an object DTO, ready for the template.

    Attributes
    ----------
        key: Object literal key (quoted when not an identifier).
        name: Property name as written in the schema.
        expr: Validator expression with modifiers applied.
        static_type: Static TypeScript type, for the JSDoc annotation.
        description: Property description.
        required: Whether the property is required.

    """

    key: str
    name: str
    expr: str
    static_type: str
    description: str = ""
    required: bool = False


@dataclass(frozen=True)
class DtoView:
    """Everything the templates need to emit one DTO.

    Attributes
    ----------
        name: DTO name, also the exported static type name.
        module: File name without extension (kebab case).
        symbol: Exported validator symbol.
        description: DTO description.
        doc: JSDoc block lines, empty when there is nothing to document.
        is_enum: Enum DTOs have ``enum_expr`` and no fields.
        fields: Object fields sorted by name.
        enum_expr: Literal-set validator for enum DTOs.
        static_type: Derived static type expression.
        partial_symbol: Symbol of the partial variant, empty if not generated.
        partial_expr: Expression of the partial variant.
        partial_static_type: Static type of the partial variant.
        validate_expr: Body of the validate helper, empty if not generated.
        guard_expr: Body of the is-type helper.
        formats: Formats used by the DTO, for import aggregation.
        references: Other DTOs the rendering refers to.

    """

    name: str
    module: str
    symbol: str
    description: str = ""
    doc: tuple[str, ...] = ()
    is_enum: bool = False
    fields: tuple[FieldView, ...] = ()
    enum_expr: str = ""
    static_type: str = ""
    partial_symbol: str = ""
    partial_expr: str = ""
    partial_static_type: str = ""
    validate_expr: str = ""
    guard_expr: str = ""
    formats: frozenset[str] = frozenset()
    references: frozenset[str] = frozenset()

    @property
    def has_partial(self) -> bool:
        """True when a partial variant is emitted."""
        return bool(self.partial_symbol)

    @property
    def has_helpers(self) -> bool:
        """True when validate/is-type helpers are emitted."""
        return bool(self.validate_expr)
