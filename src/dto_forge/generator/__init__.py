"""Code generation from DTOs to TypeScript validator modules."""

from __future__ import annotations

from dto_forge.generator.generator import (
    CodeGenerator,
    GenerationOptions,
    GenerationResult,
    sort_dtos,
)
from dto_forge.generator.planner import OutputPlan, OutputPlanner, PlannedFile
from dto_forge.generator.type_mapper import TypeMapper, referenced_names, used_formats
from dto_forge.generator.views import DtoView, FieldView

__all__ = [
    "CodeGenerator",
    "DtoView",
    "FieldView",
    "GenerationOptions",
    "GenerationResult",
    "OutputPlan",
    "OutputPlanner",
    "PlannedFile",
    "TypeMapper",
    "referenced_names",
    "sort_dtos",
    "used_formats",
]
