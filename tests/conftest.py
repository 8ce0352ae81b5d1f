"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from dto_forge.dialects import IO_TS, ZOD, Dialect
from dto_forge.ir.dto import DTO
from dto_forge.models.loader import load_openapi_schemas
from dto_forge.transform.schema_walker import SchemaWalker


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def shop_api(fixtures_dir: Path) -> Path:
    """Return path to the shop OpenAPI document."""
    return fixtures_dir / "shop-api.yaml"


@pytest.fixture
def formats_api(fixtures_dir: Path) -> Path:
    """Return path to the formats OpenAPI document."""
    return fixtures_dir / "formats-api.yaml"


@pytest.fixture
def branded_config(fixtures_dir: Path) -> Path:
    """Return path to a config with branded uuid mappings and single-file output."""
    return fixtures_dir / "branded-config.yaml"


@pytest.fixture
def shop_schemas(shop_api: Path) -> dict[str, Any]:
    """Raw component schemas of the shop document."""
    return load_openapi_schemas(shop_api)


@pytest.fixture
def shop_dtos(shop_schemas: dict[str, Any]) -> list[DTO]:
    """DTOs walked from the shop document."""
    return SchemaWalker().walk(shop_schemas).dtos


@pytest.fixture
def user_schema() -> dict[str, Any]:
    """The User schema used in the end-to-end example."""
    return {
        "type": "object",
        "required": ["id", "name"],
        "properties": {
            "id": {"type": "string"},
            "name": {"type": "string"},
            "email": {"type": "string", "format": "email"},
            "age": {"type": "integer"},
        },
    }


@pytest.fixture(params=[IO_TS, ZOD], ids=["io-ts", "zod"])
def dialect(request: pytest.FixtureRequest) -> Dialect:
    """Each supported dialect in turn."""
    return request.param
