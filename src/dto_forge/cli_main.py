"""Command-line interface for dto-forge."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from dto_forge import __version__
from dto_forge.cli.error_formatter import ErrorFormatter, ErrorTable
from dto_forge.cli.exception_handler import handle_exceptions
from dto_forge.dialects import DEFAULT_DIALECT, DIALECTS, available_dialects, get_dialect
from dto_forge.generator.generator import CodeGenerator, GenerationOptions, GenerationResult
from dto_forge.ir.dto import DTO
from dto_forge.models.loader import CONFIG_FILE_NAME, find_config_file, load_openapi_schemas
from dto_forge.registry.custom_types import CustomTypeRegistry
from dto_forge.transform.schema_walker import SchemaWalker, WalkResult
from dto_forge.validation.errors import ValidationResult
from dto_forge.validation.validator import DtoValidator

# Create Typer app
app = typer.Typer(
    name="dto-forge",
    help="Generate runtime-validated TypeScript from OpenAPI component schemas.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")

logger = logging.getLogger("dto_forge")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"dto-forge version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate io-ts or zod validators from OpenAPI component schemas.

    Every schema under components.schemas becomes a validator plus a
    derived static TypeScript type.
    """


@app.command()
def generate(
    openapi_file: Annotated[
        Path,
        typer.Argument(
            help="OpenAPI document (YAML or JSON).",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    out: Annotated[
        Path | None,
        typer.Option(
            "--out",
            "-o",
            help="Output folder. Defaults to the configured folder (./generated).",
            file_okay=False,
        ),
    ] = None,
    lang: Annotated[
        str,
        typer.Option(
            "--lang",
            "-l",
            help="Target language: typescript (io-ts) or typescript-zod.",
        ),
    ] = DEFAULT_DIALECT,
    package: Annotated[
        str | None,
        typer.Option(
            "--package",
            "-p",
            help="Package name written to package.json.",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help=f"Config file. Defaults to ./{CONFIG_FILE_NAME}, then the OpenAPI folder.",
            dir_okay=False,
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail when the schemas produce any warning.",
        ),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Format for schema diagnostics: text or table.",
        ),
    ] = "text",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show debug logging and full tracebacks.",
        ),
    ] = False,
) -> None:
    """Generate validator modules from an OpenAPI document.

    Examples
    --------
        dto-forge generate api.yaml
        dto-forge generate api.yaml --lang typescript-zod --out src/schemas
        dto-forge generate api.yaml --config dtoforge.config.yaml --strict

    """
    configure_logging(verbose)
    handle_exceptions(verbose)(_run_generate)(
        openapi_file, out, lang, package, config, strict, output_format
    )


def _run_generate(
    openapi_file: Path,
    out: Path | None,
    lang: str,
    package: str | None,
    config: Path | None,
    strict: bool,
    output_format: str,
) -> None:
    dialect = get_dialect(lang)
    config_path = find_config_file(config, openapi_file)
    if config_path is not None:
        logger.debug("using config file %s", config_path)

    walk = _walk(openapi_file)
    if not walk.dtos:
        error_console.print(f"\n✗ No schemas found in {openapi_file.name}\n")
        raise typer.Exit(code=1)

    validator = DtoValidator(strict=strict)
    diagnostics = ValidationResult()
    diagnostics.merge(walk.diagnostics)
    diagnostics.merge(validator.validate(walk.dtos))
    if diagnostics.issues:
        _print_diagnostics(diagnostics, openapi_file, output_format)
    validator.check(diagnostics)

    console.print(f"[green]✓ Parsed {len(walk.dtos)} schemas from {openapi_file.name}[/green]")

    result = CodeGenerator(dialect).generate(
        walk.dtos,
        GenerationOptions(output_dir=out, config_file=config_path, package_name=package),
    )
    _print_generation_summary(result, dialect.description)


@app.command()
def inspect(
    openapi_file: Annotated[
        Path,
        typer.Argument(
            help="OpenAPI document (YAML or JSON).",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Format for schema diagnostics: text or table.",
        ),
    ] = "text",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show debug logging and full tracebacks.",
        ),
    ] = False,
) -> None:
    """Show the DTOs and diagnostics of an OpenAPI document without writing files.

    Examples
    --------
        dto-forge inspect api.yaml
        dto-forge inspect api.yaml --format table

    """
    configure_logging(verbose)
    handle_exceptions(verbose)(_run_inspect)(openapi_file, output_format)


def _run_inspect(openapi_file: Path, output_format: str) -> None:
    walk = _walk(openapi_file)

    diagnostics = ValidationResult()
    diagnostics.merge(walk.diagnostics)
    diagnostics.merge(DtoValidator().validate(walk.dtos))

    _print_dto_table(walk.dtos)
    if diagnostics.issues:
        _print_diagnostics(diagnostics, openapi_file, output_format)
    else:
        console.print("[bold green]✓ No schema problems found[/bold green]")


@app.command("example-config")
def example_config(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Where to write the example config.",
            dir_okay=False,
        ),
    ] = Path(CONFIG_FILE_NAME),
    lang: Annotated[
        str,
        typer.Option(
            "--lang",
            "-l",
            help="Language whose mappings are used in the example.",
        ),
    ] = DEFAULT_DIALECT,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite the file if it exists.",
        ),
    ] = False,
) -> None:
    """Write a fully commented example config file.

    Examples
    --------
        dto-forge example-config
        dto-forge example-config --lang typescript-zod -o zod.config.yaml

    """
    handle_exceptions()(_run_example_config)(output, lang, force)


def _run_example_config(output: Path, lang: str, force: bool) -> None:
    if output.exists() and not force:
        error_console.print(
            f"\n✗ Config file already exists: {output}\n" "Use --force to overwrite."
        )
        raise typer.Exit(code=1)

    CustomTypeRegistry.defaults(get_dialect(lang)).save_example_config(output)
    console.print(f"[bold green]✓ Wrote example config to {output}[/bold green]")


@app.command()
def languages() -> None:
    """List the supported target languages."""
    table = Table(title="Target Languages")
    table.add_column("Name", style="cyan")
    table.add_column("Library")
    table.add_column("Symbol suffix", style="dim")

    for name in available_dialects():
        dialect = DIALECTS[name]
        table.add_row(name, dialect.description, dialect.symbol_suffix)

    console.print(table)


def _walk(openapi_file: Path) -> WalkResult:
    schemas = load_openapi_schemas(openapi_file)
    return SchemaWalker().walk(schemas)


def _print_diagnostics(result: ValidationResult, source: Path, output_format: str) -> None:
    if output_format == "table":
        ErrorTable(error_console).print_result(result)
    else:
        ErrorFormatter(error_console).format_validation_result(result, source)


def _print_dto_table(dtos: list[DTO]) -> None:
    table = Table(title="Schemas")
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Properties / Values")

    for dto in sorted(dtos, key=lambda item: item.name):
        if dto.is_enum:
            detail = ", ".join(dto.enum_values) or "-"
        else:
            detail = ", ".join(
                prop.name if prop.required else f"{prop.name}?" for prop in dto.properties
            )
        table.add_row(dto.name, dto.kind.value, detail or "-")

    console.print(table)


def _print_generation_summary(result: GenerationResult, description: str) -> None:
    table = Table(title=f"Generated {description}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Output", str(result.output_dir))
    table.add_row("Mode", result.mode.value)
    table.add_row("DTOs", str(len(result.dto_names)))
    table.add_row("Files written", str(len(result.written)))
    for path in result.skipped:
        table.add_row("Kept existing", path.name)

    console.print(table)
    console.print(f"\n[bold green]✓ Generated code in {result.output_dir}[/bold green]\n")


if __name__ == "__main__":
    app()
