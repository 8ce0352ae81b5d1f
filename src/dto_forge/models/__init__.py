"""Configuration models and input loaders."""

from __future__ import annotations

from dto_forge.models.config import (
    CustomTypeEntry,
    DialectSection,
    ForgeConfigDocument,
    GenerationSection,
    OutputSection,
)
from dto_forge.models.loader import (
    CONFIG_FILE_NAME,
    find_config_file,
    load_config_document,
    load_openapi_schemas,
    load_yaml_file,
    parse_config_document,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "CustomTypeEntry",
    "DialectSection",
    "ForgeConfigDocument",
    "GenerationSection",
    "OutputSection",
    "find_config_file",
    "load_config_document",
    "load_openapi_schemas",
    "load_yaml_file",
    "parse_config_document",
]
