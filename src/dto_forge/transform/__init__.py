"""Schema to IR transformation module.

This module walks the ``components.schemas`` section of an OpenAPI
document and produces the DTO list consumed by the code generators.

The transformation process:
    1. Each top-level schema becomes an object or enum DTO
    2. Properties are resolved recursively into IR type variants
    3. ``$ref`` pointers become references by name (never expanded)
    4. Malformed nodes are reported as diagnostics

Primary Class:
    SchemaWalker: Main walker class

Example:
-------
    >>> from dto_forge.transform import SchemaWalker
    >>>
    >>> result = SchemaWalker().walk({"Tag": {"type": "object", "properties": {}}})
    >>> [dto.name for dto in result.dtos]
    ['Tag']


"""

from dto_forge.transform.schema_walker import SchemaWalker, WalkContext, WalkResult

__all__ = ["SchemaWalker", "WalkContext", "WalkResult"]
