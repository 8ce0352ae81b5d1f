"""Decide which files a generation run produces and render their content.

Layouts:
    multiple -> <kebab-name>.ts per DTO, plus index.ts re-exporting them
    single   -> one file holding every DTO and one aggregated import block

Both layouts order DTOs by name. An optional package.json is planned
with ``overwrite=False`` so an existing manifest is left alone.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import jinja2

from dto_forge.dialects.base import Dialect
from dto_forge.exceptions import RenderError
from dto_forge.generator.views import DtoView
from dto_forge.registry.custom_types import CustomTypeRegistry
from dto_forge.registry.mappings import OutputMode
from dto_forge.rendering import create_environment

logger = logging.getLogger(__name__)

INDEX_MODULE = "index"
PACKAGE_MANIFEST = "package.json"


@dataclass(frozen=True)
class PlannedFile:
    """A file to be written relative to the output folder.

    Attributes
    ----------
        name: File name relative to the output folder.
        content: Full file content.
        overwrite: False for files that must be kept when they already exist.

    """

    name: str
    content: str
    overwrite: bool = True


@dataclass
class OutputPlan:
    """Rendered files of one generation run, in write order."""

    mode: OutputMode
    files: list[PlannedFile] = field(default_factory=list)
    exported_symbols: list[str] = field(default_factory=list)

    @property
    def file_names(self) -> list[str]:
        """Names of all planned files."""
        return [planned.name for planned in self.files]


class OutputPlanner:
    """Lay rendered DTO views out into files.

    Usage:
        planner = OutputPlanner(dialect, registry)
        plan = planner.plan(views)
    """

    def __init__(
        self,
        dialect: Dialect,
        registry: CustomTypeRegistry,
        package_name: str | None = None,
        env: jinja2.Environment | None = None,
    ) -> None:
        """Initialize the planner.

        Args:
        ----
            dialect: Dialect being generated.
            registry: Frozen registry with output and generation settings.
            package_name: Manifest package name; the registry's when None.
            env: Template environment; the bundled one when None.

        """
        self.dialect = dialect
        self.registry = registry
        self.package_name = package_name or registry.package_name
        self.env = env or create_environment()

    def plan(self, views: Sequence[DtoView]) -> OutputPlan:
        """Plan every output file for a set of DTO views.

        Args:
        ----
            views: Rendered DTOs in any order; names must be unique.

        Returns:
        -------
            The plan, with DTO files in name order.

        Raises:
        ------
            RenderError: If two DTOs map to the same module file in multiple
                mode, or a DTO maps to the index module.

        """
        ordered = sorted(views, key=lambda view: view.name)
        mode = self.registry.output.mode

        plan = OutputPlan(mode=mode)
        if mode == OutputMode.SINGLE:
            plan.files.append(self.single_file(ordered))
            entry_point = self.registry.output.single_file_name
        else:
            check_module_names(ordered)
            plan.files.extend(self.dto_file(view, ordered) for view in ordered)
            plan.files.append(self.index_file(ordered))
            entry_point = f"{INDEX_MODULE}{self.dialect.file_extension}"

        if self.registry.generation.generate_package_json:
            plan.files.append(self.package_manifest(entry_point))

        for view in ordered:
            plan.exported_symbols.append(view.symbol)
            if view.has_partial:
                plan.exported_symbols.append(view.partial_symbol)

        logger.debug("planned %d files in %s mode", len(plan.files), mode.value)
        return plan

    def dto_file(self, view: DtoView, known: Sequence[DtoView]) -> PlannedFile:
        """File holding a single DTO, importing the siblings it refers to."""
        template = self.env.get_template("dto.ts.j2")
        content = template.render(
            view=view,
            dialect=self.dialect,
            imports=self.registry.resolve_imports(view.formats),
            sibling_imports=self.sibling_imports(view, known),
        )
        return PlannedFile(name=f"{view.module}{self.dialect.file_extension}", content=content)

    def single_file(self, views: Sequence[DtoView]) -> PlannedFile:
        """One file with all DTOs and the union of their imports."""
        formats: set[str] = set()
        for view in views:
            formats.update(view.formats)

        template = self.env.get_template("single.ts.j2")
        content = template.render(
            views=views,
            dialect=self.dialect,
            imports=self.registry.resolve_imports(formats),
        )
        return PlannedFile(name=self.registry.output.single_file_name, content=content)

    def index_file(self, views: Sequence[DtoView]) -> PlannedFile:
        """Index module re-exporting every DTO module in name order."""
        template = self.env.get_template("index.ts.j2")
        content = template.render(modules=[view.module for view in views])
        return PlannedFile(name=f"{INDEX_MODULE}{self.dialect.file_extension}", content=content)

    def package_manifest(self, entry_point: str) -> PlannedFile:
        """package.json declaring the dialect's runtime dependencies."""
        manifest = {
            "name": self.package_name,
            "version": "1.0.0",
            "description": f"Generated {self.dialect.description} schemas",
            "main": entry_point,
            "types": entry_point,
            "dependencies": dict(sorted(self.dialect.package_dependencies.items())),
            "devDependencies": {"typescript": "^5.0.0"},
        }
        return PlannedFile(
            name=PACKAGE_MANIFEST,
            content=json.dumps(manifest, indent=2) + "\n",
            overwrite=False,
        )

    def sibling_imports(self, view: DtoView, known: Sequence[DtoView]) -> list[str]:
        """Import lines for other generated DTOs referenced by ``view``.

        References to names outside ``known`` get no import.
        """
        by_name = {other.name: other for other in known}
        lines: list[str] = []
        for name in sorted(view.references):
            target = by_name.get(name)
            if target is None or target.name == view.name:
                continue
            lines.append(f"import {{ {target.symbol} }} from './{target.module}';")
        return lines


def check_module_names(views: Sequence[DtoView]) -> None:
    """Reject DTOs whose module files would overwrite each other.

    Raises
    ------
        RenderError: Naming the DTOs that share a module, or the DTO that
            maps to the index module.

    """
    owners: dict[str, str] = {}
    for view in views:
        if view.module == INDEX_MODULE:
            raise RenderError(
                f"module '{view.module}' is reserved for the index file",
                view.name,
            )
        other = owners.setdefault(view.module, view.name)
        if other != view.name:
            raise RenderError(
                f"module '{view.module}' is already produced by DTO '{other}'",
                view.name,
            )
