"""Tests for input loading and the config document models."""

from __future__ import annotations

from pathlib import Path

import pytest
from dto_forge.exceptions import ConfigurationError, LoaderError
from dto_forge.models import (
    CONFIG_FILE_NAME,
    ForgeConfigDocument,
    find_config_file,
    load_config_document,
    load_openapi_schemas,
    load_yaml_file,
    parse_config_document,
)
from dto_forge.models.pydantic_errors import format_pydantic_location


class TestLoadYamlFile:
    """Tests for load_yaml_file."""

    def test_loads_json(self, tmp_path: Path) -> None:
        """JSON documents are accepted."""
        path = tmp_path / "api.json"
        path.write_text('{"openapi": "3.0.0"}')
        assert load_yaml_file(path) == {"openapi": "3.0.0"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises LoaderError with the path."""
        with pytest.raises(LoaderError, match="File not found") as exc_info:
            load_yaml_file(tmp_path / "missing.yaml")
        assert exc_info.value.path == tmp_path / "missing.yaml"

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        """Only YAML and JSON extensions are accepted."""
        path = tmp_path / "api.txt"
        path.write_text("openapi: 3.0.0")
        with pytest.raises(LoaderError, match="Unsupported file extension"):
            load_yaml_file(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty document is rejected."""
        path = tmp_path / "api.yaml"
        path.write_text("")
        with pytest.raises(LoaderError, match="empty"):
            load_yaml_file(path)

    def test_list_root(self, tmp_path: Path) -> None:
        """The root must be a mapping."""
        path = tmp_path / "api.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(LoaderError, match="Expected dictionary"):
            load_yaml_file(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Syntax errors are wrapped."""
        path = tmp_path / "api.yaml"
        path.write_text("not: valid: yaml: [")
        with pytest.raises(LoaderError, match="YAML parsing error"):
            load_yaml_file(path)


class TestLoadOpenapiSchemas:
    """Tests for load_openapi_schemas."""

    def test_returns_component_schemas(self, shop_api: Path) -> None:
        """The components.schemas mapping is returned in document order."""
        schemas = load_openapi_schemas(shop_api)
        assert list(schemas) == ["User", "OrderStatus", "Order", "LineItem"]

    def test_no_components(self, tmp_path: Path) -> None:
        """Documents without components have no schemas."""
        path = tmp_path / "api.yaml"
        path.write_text("openapi: 3.0.0\npaths: {}\n")
        assert load_openapi_schemas(path) == {}

    def test_schemas_not_mapping(self, tmp_path: Path) -> None:
        """A schemas list is rejected."""
        path = tmp_path / "api.yaml"
        path.write_text("components:\n  schemas:\n    - User\n")
        with pytest.raises(LoaderError, match="components.schemas"):
            load_openapi_schemas(path)


class TestConfigDocument:
    """Tests for the pydantic config models."""

    def test_empty_document(self) -> None:
        """An empty file is an empty configuration."""
        doc = parse_config_document(None)
        assert doc.output is None
        assert doc.custom_types == {}

    def test_aliases(self) -> None:
        """camelCase keys and dialect-specific validator keys are accepted."""
        doc = parse_config_document(
            {
                "output": {"singleFileName": "all.ts"},
                "generation": {"generateHelpers": False},
                "customTypes": {
                    "uuid": {"ioTsType": "UUID", "typeScriptType": "UUID", "import": "x"},
                    "email": {"zodType": "z.string().email()"},
                },
                "packageName": "@acme/schemas",
            }
        )
        assert doc.output is not None and doc.output.single_file_name == "all.ts"
        assert doc.generation is not None and doc.generation.generate_helpers is False
        assert doc.custom_types["uuid"].validator == "UUID"
        assert doc.custom_types["uuid"].import_statement == "x"
        assert doc.custom_types["email"].typescript_type == "string"
        assert doc.package_name == "@acme/schemas"

    def test_sections_for_dialect(self) -> None:
        """The dialect section follows the shared one."""
        doc = ForgeConfigDocument.model_validate({"typescript-zod": {"packageName": "z"}})
        sections = doc.sections_for("typescript-zod")
        assert len(sections) == 2
        assert sections[0] is doc
        assert doc.sections_for("typescript") == [doc]

    def test_unknown_key_rejected(self) -> None:
        """Typos are reported with their location."""
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config_document({"output": {"folderr": "x"}})
        assert exc_info.value.details == [
            "output.folderr: This field is not allowed in this context"
        ]

    def test_missing_validator(self) -> None:
        """A custom type without a validator expression is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config_document({"customTypes": {"uuid": {"typeScriptType": "UUID"}}})
        assert any(d.startswith("customTypes.uuid.validator") for d in exc_info.value.details)

    def test_root_not_mapping(self, tmp_path: Path) -> None:
        """A list document is rejected."""
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text("- output\n")
        with pytest.raises(ConfigurationError):
            load_config_document(path)

    def test_format_location(self) -> None:
        """List indices are rendered in brackets."""
        assert format_pydantic_location(("customTypes", "uuid", 0, "x")) == "customTypes.uuid[0].x"


class TestFindConfigFile:
    """Tests for config discovery."""

    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        """An explicit path is returned even if it does not exist."""
        explicit = tmp_path / "custom.yaml"
        assert find_config_file(explicit, tmp_path / "api.yaml") == explicit

    def test_working_directory_first(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The working directory is searched before the OpenAPI folder."""
        cwd = tmp_path / "cwd"
        spec_dir = tmp_path / "spec"
        cwd.mkdir()
        spec_dir.mkdir()
        (cwd / CONFIG_FILE_NAME).write_text("{}")
        (spec_dir / CONFIG_FILE_NAME).write_text("{}")
        monkeypatch.chdir(cwd)

        assert find_config_file(None, spec_dir / "api.yaml") == Path.cwd() / CONFIG_FILE_NAME

    def test_openapi_folder(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The OpenAPI folder is used when the working directory has no config."""
        cwd = tmp_path / "cwd"
        spec_dir = tmp_path / "spec"
        cwd.mkdir()
        spec_dir.mkdir()
        (spec_dir / CONFIG_FILE_NAME).write_text("{}")
        monkeypatch.chdir(cwd)

        assert find_config_file(None, spec_dir / "api.yaml") == spec_dir / CONFIG_FILE_NAME

    def test_nothing_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """None is returned when no config exists."""
        monkeypatch.chdir(tmp_path)
        assert find_config_file(None, tmp_path / "api.yaml") is None
