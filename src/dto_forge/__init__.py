"""dto-forge: Generator of runtime-validated TypeScript schemas from OpenAPI.

This package provides tools for:
- Walking OpenAPI ``components.schemas`` into an Intermediate Representation (IR)
- Mapping OpenAPI formats to dialect-specific validators via a custom type registry
- Rendering the IR as io-ts or zod modules with a deterministic file layout

Quick Start:
    >>> from pathlib import Path
    >>> from dto_forge.models import load_openapi_schemas
    >>> from dto_forge.transform import SchemaWalker
    >>> from dto_forge.dialects import get_dialect
    >>> from dto_forge.generator import CodeGenerator, GenerationOptions
    >>>
    >>> schemas = load_openapi_schemas(Path("api.yaml"))
    >>> walk = SchemaWalker().walk(schemas)
    >>> CodeGenerator(get_dialect("typescript-zod")).generate(
    ...     walk.dtos, GenerationOptions(output_dir=Path("generated"))
    ... )

Modules:
    ir: Closed IR type model (DTOs, properties, type variants)
    transform: Schema walker turning raw schema nodes into IR
    registry: Per-dialect custom type registry and output policy
    dialects: Validation-library lexicons (io-ts, zod)
    generator: Type mapping, output planning and file writing
    validation: Structured diagnostics and semantic checks on DTOs
    models: Spec/config loading and config document models
    cli: Command-line interface
"""

__version__ = "0.1.0"
