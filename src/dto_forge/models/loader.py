"""YAML/JSON file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dto_forge.exceptions import ConfigurationError, LoaderError
from dto_forge.models.config import ForgeConfigDocument
from dto_forge.models.pydantic_errors import describe_validation_error

CONFIG_FILE_NAME = "dtoforge.config.yaml"


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON file and return the raw dictionary.

    Args:
    ----
        path: Path to the YAML or JSON file.

    Returns:
    -------
        Parsed dictionary from the file.

    Raises:
    ------
        LoaderError: If the file cannot be loaded or parsed.

    """
    if not path.exists():
        raise LoaderError(f"File not found: {path}", path)

    if not path.is_file():
        raise LoaderError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise LoaderError(
            f"Unsupported file extension: {suffix}. Use .yaml, .yml, or .json",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LoaderError(f"YAML parsing error: {e}", path) from e
    except OSError as e:
        raise LoaderError(f"File read error: {e}", path) from e

    if data is None:
        raise LoaderError("File is empty", path)

    if not isinstance(data, dict):
        raise LoaderError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )

    return data


def load_openapi_schemas(path: Path) -> dict[str, Any]:
    """Load an OpenAPI document and return its ``components.schemas`` mapping.

    Args:
    ----
        path: Path to the OpenAPI document.

    Returns:
    -------
        Schema name to raw schema node. Empty when the document has no
        component schemas.

    Raises:
    ------
        LoaderError: If the file cannot be loaded or a section has the wrong shape.

    """
    document = load_yaml_file(path)

    components = document.get("components")
    if components is None:
        return {}
    if not isinstance(components, dict):
        raise LoaderError("'components' must be a mapping", path)

    schemas = components.get("schemas")
    if schemas is None:
        return {}
    if not isinstance(schemas, dict):
        raise LoaderError("'components.schemas' must be a mapping", path)

    return schemas


def parse_config_document(data: Any, path: Path | None = None) -> ForgeConfigDocument:
    """Validate raw config data.

    Args:
    ----
        data: Parsed YAML content (``None`` for an empty file).
        path: File the data came from, for error messages.

    Returns:
    -------
        Validated config document.

    Raises:
    ------
        ConfigurationError: If the document does not match the config schema.

    """
    try:
        return ForgeConfigDocument.model_validate(data)
    except ValidationError as e:
        details = describe_validation_error(e)
        raise ConfigurationError(
            f"Invalid configuration ({len(details)} problem(s))",
            path,
            details,
        ) from e


def load_config_document(path: Path) -> ForgeConfigDocument | None:
    """Load a config file.

    A missing file is not an error: ``None`` is returned and built-in
    defaults stay in effect.

    Args:
    ----
        path: Path to the config file.

    Returns:
    -------
        Validated document, or None if the file does not exist.

    Raises:
    ------
        ConfigurationError: If the file cannot be parsed or is invalid.

    """
    if not path.exists():
        return None

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"YAML parsing error: {e}", path) from e
    except OSError as e:
        raise ConfigurationError(f"File read error: {e}", path) from e

    return parse_config_document(data, path)


def find_config_file(explicit: Path | None, openapi_path: Path | None = None) -> Path | None:
    """Locate the config file to use.

    Args:
    ----
        explicit: Path given on the command line, used as-is when set.
        openapi_path: OpenAPI document; its folder is searched last.

    Returns:
    -------
        Path of the config file, or None if none was found.

    """
    if explicit is not None:
        return explicit

    candidates = [Path.cwd() / CONFIG_FILE_NAME]
    if openapi_path is not None:
        candidates.append(openapi_path.parent / CONFIG_FILE_NAME)

    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None
