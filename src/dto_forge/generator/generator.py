"""Generate runtime-validated TypeScript from DTOs.

One generator serves every dialect. A run:
    1. builds a registry from the dialect defaults and the optional config,
    2. renders each DTO (sorted by name) into a template view,
    3. asks the planner for the file layout,
    4. writes the files one at a time.

Configuration problems surface before the output folder is touched.
Writes are sequential without rollback.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from dto_forge.dialects.base import Dialect
from dto_forge.exceptions import OutputWriteError, RenderError
from dto_forge.generator.planner import OutputPlan, OutputPlanner, PlannedFile
from dto_forge.generator.type_mapper import TypeMapper, referenced_names, used_formats
from dto_forge.generator.views import DtoView, FieldView
from dto_forge.ir.dto import DTO
from dto_forge.registry.custom_types import CustomTypeRegistry
from dto_forge.registry.mappings import OutputMode
from dto_forge.transform.naming import comment_text, property_key, to_kebab_case

logger = logging.getLogger(__name__)


@dataclass
class GenerationOptions:
    """Per-run settings supplied by the caller.

    Attributes
    ----------
        output_dir: Output folder; the configured folder when None.
        config_file: Config file to load; a missing file keeps the defaults.
        package_name: Manifest package name overriding the configured one.

    """

    output_dir: Path | None = None
    config_file: Path | None = None
    package_name: str | None = None


@dataclass
class GenerationResult:
    """Outcome of a successful run."""

    output_dir: Path
    mode: OutputMode
    dto_names: list[str] = field(default_factory=list)
    exported_symbols: list[str] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


class CodeGenerator:
    """Dialect-parameterized code generator.

    Usage:
        generator = CodeGenerator(get_dialect("typescript-zod"))
        result = generator.generate(dtos, GenerationOptions(output_dir=Path("out")))
    """

    def __init__(self, dialect: Dialect) -> None:
        """Initialize the generator.

        Args:
        ----
            dialect: Validation-library lexicon to generate for.

        """
        self.dialect = dialect

    def build_registry(self, options: GenerationOptions) -> CustomTypeRegistry:
        """Registry for one run: defaults, then the config file, then frozen.

        Raises
        ------
            ConfigurationError: If the config file is invalid.

        """
        registry = CustomTypeRegistry.defaults(self.dialect)
        if options.config_file is not None:
            registry.load_from_config(options.config_file)
        registry.freeze()
        return registry

    def plan(
        self,
        dtos: Sequence[DTO],
        registry: CustomTypeRegistry,
        package_name: str | None = None,
    ) -> OutputPlan:
        """Render DTOs into an in-memory file plan without writing anything.

        Raises
        ------
            RenderError: If a DTO cannot be rendered.

        """
        ordered = sort_dtos(dtos)
        mapper = TypeMapper(self.dialect, registry)
        views = [self.render_dto(dto, mapper, registry) for dto in ordered]
        return OutputPlanner(self.dialect, registry, package_name).plan(views)

    def generate(
        self,
        dtos: Sequence[DTO],
        options: GenerationOptions | None = None,
    ) -> GenerationResult:
        """Generate and write code for a batch of DTOs.

        Args:
        ----
            dtos: DTOs to generate; on duplicate names the last one wins.
            options: Per-run settings.

        Returns:
        -------
            Paths written and skipped, plus the exported symbols.

        Raises:
        ------
            ConfigurationError: If the config file is invalid.
            RenderError: If a DTO cannot be rendered.
            OutputWriteError: If the output folder or a file cannot be written.

        """
        options = options or GenerationOptions()
        registry = self.build_registry(options)
        ordered = sort_dtos(dtos)
        plan = self.plan(ordered, registry, options.package_name)

        output_dir = options.output_dir or Path(registry.output.folder)
        result = GenerationResult(
            output_dir=output_dir,
            mode=plan.mode,
            dto_names=[dto.name for dto in ordered],
            exported_symbols=list(plan.exported_symbols),
        )

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(f"cannot create output folder: {e}", output_dir) from e

        for planned in plan.files:
            path = output_dir / planned.name
            if self._write(path, planned):
                result.written.append(path)
            else:
                result.skipped.append(path)

        logger.info(
            "generated %d DTOs into %s (%d files written)",
            len(result.dto_names),
            output_dir,
            len(result.written),
        )
        return result

    def render_dto(
        self,
        dto: DTO,
        mapper: TypeMapper,
        registry: CustomTypeRegistry,
    ) -> DtoView:
        """Build the template view for one DTO.

        Raises
        ------
            RenderError: Wrapping any failure with the DTO and property name.

        """
        generation = registry.generation
        symbol = self.dialect.symbol(dto.name)

        fields: list[FieldView] = []
        for prop in dto.properties:
            try:
                fields.append(
                    FieldView(
                        key=property_key(prop.name),
                        name=prop.name,
                        expr=mapper.property_expression(prop),
                        static_type=mapper.property_static_type(prop),
                        description=prop.description,
                        required=prop.required,
                    )
                )
            except (KeyError, IndexError, ValueError) as e:
                raise RenderError(str(e), dto.name, prop.name) from e

        try:
            enum_expr = self.dialect.enum_expr(dto.enum_values) if dto.is_enum else ""
            partial = generation.generate_partial_codecs and not dto.is_enum
            partial_symbol = self.dialect.partial_symbol(dto.name) if partial else ""
            return DtoView(
                name=dto.name,
                module=to_kebab_case(dto.name),
                symbol=symbol,
                description=dto.description,
                doc=jsdoc_lines(dto.description, fields),
                is_enum=dto.is_enum,
                fields=tuple(fields),
                enum_expr=enum_expr,
                static_type=self.dialect.static_type_template.format(symbol=symbol),
                partial_symbol=partial_symbol,
                partial_expr=(
                    self.dialect.partial_template.format(symbol=symbol) if partial else ""
                ),
                partial_static_type=(
                    self.dialect.static_type_template.format(symbol=partial_symbol)
                    if partial
                    else ""
                ),
                validate_expr=(
                    self.dialect.validate_template.format(symbol=symbol)
                    if generation.generate_helpers
                    else ""
                ),
                guard_expr=(
                    self.dialect.guard_template.format(symbol=symbol)
                    if generation.generate_helpers
                    else ""
                ),
                formats=frozenset(used_formats(dto)),
                references=frozenset(referenced_names(dto)),
            )
        except (KeyError, IndexError, ValueError) as e:
            raise RenderError(str(e), dto.name) from e

    def _write(self, path: Path, planned: PlannedFile) -> bool:
        if not planned.overwrite and path.exists():
            logger.warning("keeping existing %s", path)
            return False
        try:
            path.write_text(planned.content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(f"cannot write file: {e}", path) from e
        logger.debug("wrote %s", path)
        return True


def sort_dtos(dtos: Sequence[DTO]) -> list[DTO]:
    """DTOs ordered by name, keeping the last of any duplicate names."""
    by_name: dict[str, DTO] = {}
    for dto in dtos:
        if dto.name in by_name:
            logger.warning("duplicate DTO name '%s'; the later definition wins", dto.name)
        by_name[dto.name] = dto
    return [by_name[name] for name in sorted(by_name)]


def jsdoc_lines(description: str, fields: Sequence[FieldView] = ()) -> tuple[str, ...]:
    """JSDoc block for a DTO: its description and one ``@property`` tag per field.

    Returns an empty tuple when there is nothing to document.
    """
    body: list[str] = [comment_text(line) for line in description.splitlines()]
    if fields and body:
        body.append("")
    for item in fields:
        name = item.name if item.required else f"[{item.name}]"
        tag = f"@property {{{item.static_type}}} {name}"
        summary = comment_text(" ".join(item.description.split()))
        body.append(f"{tag} - {summary}" if summary else tag)

    if not body:
        return ()
    lines = ["/**"]
    lines.extend(f" * {line}".rstrip() for line in body)
    lines.append(" */")
    return tuple(lines)
