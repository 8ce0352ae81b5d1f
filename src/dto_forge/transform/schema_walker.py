"""Walk OpenAPI schema nodes into IR types and DTOs.

Resolution precedence for a single node:
    1. ``enum``            -> EnumType (declared order kept)
    2. ``$ref``            -> ReferenceType (target is never visited)
    3. ``type: object``    -> ObjectType wrapping an inline DTO
    4. ``type: array``     -> ArrayType of the resolved ``items``
    5. scalar ``type``     -> PrimitiveType with optional ``format``
    6. anything else       -> PrimitiveType named after the raw type

Malformed nodes are recorded as diagnostics in the walk result instead of
being dropped silently.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from dto_forge.exceptions import SchemaRecursionError
from dto_forge.ir.dto import DTO, DTOKind, Property
from dto_forge.ir.types import (
    SCALAR_TYPES,
    UNKNOWN_TYPE,
    ArrayType,
    EnumType,
    IRType,
    ObjectType,
    PrimitiveType,
    ReferenceType,
)
from dto_forge.transform.naming import enum_type_name, ref_name
from dto_forge.validation.errors import SCHEMAS_PATH, ErrorCodes, ValidationResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


@dataclass(frozen=True)
class WalkContext:
    """Where a node sits relative to its owning object.

    Attributes
    ----------
        name: Name of the property (or schema) being resolved.
        required: Required set of the owning object.
        path: Dotted path of the node, used in diagnostics.

    """

    name: str
    required: frozenset[str] = frozenset()
    path: str = ""


@dataclass
class WalkResult:
    """DTOs built from a schema mapping plus the diagnostics collected."""

    dtos: list[DTO] = field(default_factory=list)
    diagnostics: ValidationResult = field(default_factory=ValidationResult)


class SchemaWalker:
    """Turn raw schema nodes into IR.

    Usage:
        walker = SchemaWalker()
        result = walker.walk(document["components"]["schemas"])
        for issue in result.diagnostics.issues:
            print(issue)
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Initialize the walker.

        Args:
        ----
            max_depth: Maximum nesting of inline schemas before walking fails.

        """
        self.max_depth = max_depth
        self._result = ValidationResult()
        self._stack: list[Mapping[str, Any]] = []

    @property
    def diagnostics(self) -> ValidationResult:
        """Diagnostics collected since the last ``walk`` started."""
        return self._result

    def walk(self, schemas: Mapping[str, Any]) -> WalkResult:
        """Build one DTO per top-level schema.

        Args:
        ----
            schemas: Name to schema-node mapping (``components.schemas``).

        Returns:
        -------
            WalkResult with DTOs in input order and collected diagnostics.

        Raises:
        ------
            SchemaRecursionError: If an inline schema contains itself or
                nests deeper than ``max_depth``.

        """
        self._result = ValidationResult()
        self._stack = []
        dtos: list[DTO] = []

        for name, node in schemas.items():
            path = f"{SCHEMAS_PATH}.{name}"
            if not isinstance(node, Mapping):
                self._result.add_error(
                    code=ErrorCodes.S001_SCHEMA_NOT_MAPPING,
                    message=f"Schema '{name}' is a {type(node).__name__}, not a mapping; skipped",
                    path=path,
                )
                continue
            dtos.append(self.build_dto(str(name), node, path))

        logger.debug("walked %d schemas into %d DTOs", len(schemas), len(dtos))
        return WalkResult(dtos=dtos, diagnostics=self._result)

    def build_dto(self, name: str, node: Mapping[str, Any], path: str = "") -> DTO:
        """Build the DTO for a single top-level schema."""
        path = path or f"{SCHEMAS_PATH}.{name}"

        with self._descend(node, path):
            if "enum" in node:
                return DTO(
                    name=name,
                    kind=DTOKind.ENUM,
                    description=_description(node),
                    enum_values=self._enum_values(node, path),
                )

            schema_type = node.get("type")
            if schema_type != "object" and "properties" not in node:
                self._result.add_warning(
                    code=ErrorCodes.S009_UNSUPPORTED_TOP_LEVEL,
                    message=(
                        f"Schema '{name}' has type {schema_type!r}; only objects and enums "
                        "become DTOs, generating an empty object"
                    ),
                    path=path,
                    suggestion="Wrap the value in an object schema or use $ref from a property",
                )

            return self._object_dto(name, node, path)

    def resolve(self, node: Mapping[str, Any], context: WalkContext) -> IRType:
        """Resolve a schema node to an IR type.

        Args:
        ----
            node: The raw schema node.
            context: Name, owning required set and path of the node.

        Returns:
        -------
            The resolved IR type. Inline objects carry their nested DTO.

        """
        with self._descend(node, context.path):
            if "enum" in node:
                underlying = node.get("type")
                return EnumType(
                    name=enum_type_name(context.name),
                    underlying_type=underlying if isinstance(underlying, str) else "string",
                    values=self._enum_values(node, context.path),
                )

            if "$ref" in node:
                ref = node["$ref"]
                if isinstance(ref, str) and ref:
                    return ReferenceType(ref_name=ref_name(ref))
                self._result.add_warning(
                    code=ErrorCodes.S006_INVALID_REF,
                    message=f"$ref must be a non-empty string, got {ref!r}",
                    path=f"{context.path}.$ref",
                )
                return PrimitiveType(name=UNKNOWN_TYPE)

            schema_type = node.get("type")
            if schema_type == "object":
                return ObjectType(inline_dto=self._object_dto(context.name, node, context.path))
            if schema_type == "array":
                return ArrayType(element=self._array_element(node, context))
            if schema_type in SCALAR_TYPES:
                schema_format = node.get("format")
                return PrimitiveType(
                    name=schema_type,
                    format=schema_format if isinstance(schema_format, str) else "",
                )

            raw_name = schema_type if isinstance(schema_type, str) and schema_type else UNKNOWN_TYPE
            self._result.add_warning(
                code=ErrorCodes.S010_UNRECOGNIZED_TYPE,
                message=f"Unrecognized schema type {schema_type!r}; rendered as unvalidated",
                path=context.path,
            )
            return PrimitiveType(name=raw_name)

    def _object_dto(self, name: str, node: Mapping[str, Any], path: str) -> DTO:
        """Build an object DTO; the caller has already descended into ``node``."""
        required = self._required_set(node, path)

        raw_properties = node.get("properties")
        if raw_properties is None:
            raw_properties = {}
        elif not isinstance(raw_properties, Mapping):
            self._result.add_warning(
                code=ErrorCodes.S002_PROPERTIES_NOT_MAPPING,
                message=(
                    f"'properties' of '{name}' is a {type(raw_properties).__name__}, "
                    "not a mapping; all properties dropped"
                ),
                path=f"{path}.properties",
            )
            raw_properties = {}

        context = WalkContext(name=name, required=required, path=path)
        properties: list[Property] = []
        for prop_name, prop_node in sorted(raw_properties.items(), key=lambda item: str(item[0])):
            prop_name = str(prop_name)
            prop_path = f"{path}.properties.{prop_name}"
            if not isinstance(prop_node, Mapping):
                self._result.add_warning(
                    code=ErrorCodes.S003_PROPERTY_NOT_MAPPING,
                    message=(
                        f"Property '{prop_name}' is a {type(prop_node).__name__}, "
                        "not a schema mapping; dropped"
                    ),
                    path=prop_path,
                )
                continue
            properties.append(self._property(prop_name, prop_node, context, prop_path))

        return DTO(
            name=name,
            kind=DTOKind.OBJECT,
            description=_description(node),
            properties=tuple(properties),
            required=required,
        )

    def _property(
        self,
        name: str,
        node: Mapping[str, Any],
        owner: WalkContext,
        path: str,
    ) -> Property:
        ir_type = self.resolve(node, WalkContext(name=name, path=path))
        return Property(
            name=name,
            type=ir_type,
            description=_description(node),
            nullable=node.get("nullable") is True,
            required=name in owner.required,
        )

    def _array_element(self, node: Mapping[str, Any], context: WalkContext) -> IRType:
        items = node.get("items")
        items_path = f"{context.path}.items"
        if not isinstance(items, Mapping):
            self._result.add_warning(
                code=ErrorCodes.S005_INVALID_ITEMS,
                message="Array 'items' is missing or not a schema mapping; elements unvalidated",
                path=items_path,
            )
            return PrimitiveType(name=UNKNOWN_TYPE)
        return self.resolve(items, WalkContext(name=f"{context.name}Item", path=items_path))

    def _required_set(self, node: Mapping[str, Any], path: str) -> frozenset[str]:
        raw = node.get("required")
        if raw is None:
            return frozenset()
        if not isinstance(raw, list):
            self._result.add_warning(
                code=ErrorCodes.S004_INVALID_REQUIRED,
                message=f"'required' must be a list of names, got {type(raw).__name__}; ignored",
                path=f"{path}.required",
            )
            return frozenset()

        names: set[str] = set()
        for index, entry in enumerate(raw):
            if isinstance(entry, str):
                names.add(entry)
            else:
                self._result.add_warning(
                    code=ErrorCodes.S004_INVALID_REQUIRED,
                    message=f"Required entry {entry!r} is not a property name; ignored",
                    path=f"{path}.required[{index}]",
                )
        return frozenset(names)

    def _enum_values(self, node: Mapping[str, Any], path: str) -> tuple[str, ...]:
        raw = node.get("enum")
        if not isinstance(raw, list):
            self._result.add_warning(
                code=ErrorCodes.S008_ENUM_NOT_LIST,
                message=f"'enum' must be a list, got {type(raw).__name__}; no members generated",
                path=f"{path}.enum",
            )
            return ()

        values: list[str] = []
        for index, value in enumerate(raw):
            if isinstance(value, str):
                values.append(value)
            else:
                self._result.add_warning(
                    code=ErrorCodes.S007_NON_STRING_ENUM_VALUE,
                    message=f"Enum member {value!r} is not a string; dropped",
                    path=f"{path}.enum[{index}]",
                    suggestion="Only string enums can be rendered as literal sets",
                )
        return tuple(values)

    @contextmanager
    def _descend(self, node: Mapping[str, Any], path: str) -> Iterator[None]:
        """Track ``node`` on the ancestor stack while it is being resolved."""
        if any(ancestor is node for ancestor in self._stack):
            raise SchemaRecursionError("inline schema contains itself", path)
        if len(self._stack) >= self.max_depth:
            raise SchemaRecursionError(
                f"schema nesting exceeds maximum depth of {self.max_depth}", path
            )
        self._stack.append(node)
        try:
            yield
        finally:
            self._stack.pop()


def _description(node: Mapping[str, Any]) -> str:
    description = node.get("description")
    return description.strip() if isinstance(description, str) else ""
