"""Custom type registry and output settings."""

from __future__ import annotations

from dto_forge.registry.custom_types import CustomTypeRegistry
from dto_forge.registry.mappings import (
    CustomTypeMapping,
    GenerationConfig,
    OutputConfig,
    OutputMode,
)

__all__ = [
    "CustomTypeMapping",
    "CustomTypeRegistry",
    "GenerationConfig",
    "OutputConfig",
    "OutputMode",
]
