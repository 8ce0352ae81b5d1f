"""Per-dialect registry of custom format mappings and output policy.

A registry starts as a copy of the dialect's built-in defaults, absorbs an
optional config document during the load phase and is then frozen for the
rest of the generation run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from dto_forge.exceptions import ConfigurationError, RegistryFrozenError
from dto_forge.models.config import DialectSection, ForgeConfigDocument
from dto_forge.models.loader import load_config_document
from dto_forge.registry.mappings import (
    CustomTypeMapping,
    GenerationConfig,
    OutputConfig,
    OutputMode,
)
from dto_forge.rendering import create_environment

if TYPE_CHECKING:
    from dto_forge.dialects.base import Dialect

logger = logging.getLogger(__name__)


class CustomTypeRegistry:
    """Format mappings plus output and generation settings for one dialect.

    Usage:
        registry = CustomTypeRegistry.defaults(ZOD)
        registry.load_from_config(Path("dtoforge.config.yaml"))
        registry.freeze()
        mapping = registry.get("uuid")
    """

    def __init__(self, dialect: Dialect) -> None:
        """Initialize a registry seeded with the dialect defaults.

        Args:
        ----
            dialect: Dialect whose default mappings and base import are used.

        """
        self.dialect = dialect
        self._mappings: dict[str, CustomTypeMapping] = dict(dialect.default_mappings)
        self.output = OutputConfig()
        self.generation = GenerationConfig()
        self.package_name = dialect.default_package_name
        self._frozen = False

    @classmethod
    def defaults(cls, dialect: Dialect) -> CustomTypeRegistry:
        """Fresh registry holding only the dialect's built-in mappings."""
        return cls(dialect)

    @property
    def is_frozen(self) -> bool:
        """True once the load phase has ended."""
        return self._frozen

    @property
    def formats(self) -> list[str]:
        """Registered format names, sorted."""
        return sorted(self._mappings)

    def freeze(self) -> None:
        """End the load phase; further changes raise RegistryFrozenError."""
        self._frozen = True

    def register(self, format_name: str, mapping: CustomTypeMapping) -> None:
        """Register or replace the mapping for a format.

        Args:
        ----
            format_name: OpenAPI ``format`` value.
            mapping: Rendering for values of that format.

        Raises:
        ------
            RegistryFrozenError: If the registry has been frozen.

        """
        self._check_mutable()
        if format_name in self._mappings:
            logger.debug("overriding mapping for format '%s'", format_name)
        self._mappings[format_name] = mapping

    def get(self, format_name: str) -> CustomTypeMapping | None:
        """Mapping for a format, or None if the format is not registered."""
        if not format_name:
            return None
        return self._mappings.get(format_name)

    def resolve_imports(self, used_formats: Iterable[str]) -> list[str]:
        """Import lines needed by a set of used formats.

        Args:
        ----
            used_formats: Formats referenced by the code being rendered.

        Returns:
        -------
            The dialect base import, followed by each distinct non-empty
            mapping import in sorted order.

        """
        extra: set[str] = set()
        for format_name in used_formats:
            mapping = self.get(format_name)
            if mapping is not None and mapping.import_statement:
                extra.add(mapping.import_statement)
        extra.discard(self.dialect.base_import)
        return [self.dialect.base_import, *sorted(extra)]

    def load_from_config(self, path: Path) -> bool:
        """Apply a config file.

        Args:
        ----
            path: Config file path. A missing file leaves the defaults untouched.

        Returns:
        -------
            True if a file was found and applied.

        Raises:
        ------
            ConfigurationError: If the file cannot be parsed or is invalid.
            RegistryFrozenError: If the registry has been frozen.

        """
        self._check_mutable()
        document = load_config_document(path)
        if document is None:
            logger.debug("config file %s not found, using defaults", path)
            return False

        self.apply_config(document, path)
        logger.debug("loaded config from %s", path)
        return True

    def apply_config(self, document: ForgeConfigDocument, path: Path | None = None) -> None:
        """Layer a validated config document over the current settings.

        Top-level sections are applied first, then the section named after
        the dialect. Only fields that are present replace existing values.

        Args:
        ----
            document: Validated config document.
            path: Source file, for error messages.

        Raises:
        ------
            ConfigurationError: If the resulting settings are unusable.
            RegistryFrozenError: If the registry has been frozen.

        """
        self._check_mutable()
        for section in document.sections_for(self.dialect.name):
            self._apply_section(section)

        if self.output.is_single_file and not self.output.single_file_name.endswith(
            self.dialect.file_extension
        ):
            raise ConfigurationError(
                f"singleFileName must end with '{self.dialect.file_extension}', "
                f"got '{self.output.single_file_name}'",
                path,
            )

    def save_example_config(self, path: Path) -> None:
        """Write a commented example config for this dialect.

        Args:
        ----
            path: Destination file; parent directories are created.

        """
        template = create_environment().get_template("example_config.yaml.j2")
        content = template.render(
            dialect=self.dialect,
            validator_key="zodType" if self.dialect.name == "typescript-zod" else "ioTsType",
            output=OutputConfig(),
            generation=GenerationConfig(),
            examples=sorted(self.dialect.example_mappings.items()),
        )
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def _apply_section(self, section: DialectSection) -> None:
        if section.output is not None:
            out = section.output
            self.output = replace(
                self.output,
                folder=out.folder if out.folder is not None else self.output.folder,
                mode=OutputMode(out.mode) if out.mode is not None else self.output.mode,
                single_file_name=(
                    out.single_file_name
                    if out.single_file_name is not None
                    else self.output.single_file_name
                ),
            )

        if section.generation is not None:
            gen = section.generation
            self.generation = replace(
                self.generation,
                **{
                    field: value
                    for field, value in (
                        ("generate_package_json", gen.generate_package_json),
                        ("generate_helpers", gen.generate_helpers),
                        ("generate_partial_codecs", gen.generate_partial_codecs),
                    )
                    if value is not None
                },
            )

        if section.package_name is not None:
            self.package_name = section.package_name

        for format_name, entry in section.custom_types.items():
            self.register(
                format_name,
                CustomTypeMapping(
                    validator_expr=entry.validator,
                    scalar_type=entry.typescript_type,
                    import_statement=entry.import_statement,
                ),
            )

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"custom type registry for '{self.dialect.name}' is frozen"
            )
