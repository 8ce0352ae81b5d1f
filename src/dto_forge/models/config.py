"""Models for the dto-forge configuration document."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class CustomTypeEntry(BaseModel):
    """Mapping of one OpenAPI ``format`` to a validator expression.

    The validator may be given under a dialect-specific key (``ioTsType``,
    ``zodType``) or the neutral ``validator`` key.

    Example:
    -------
        ```yaml
        customTypes:
          uuid:
            zodType: "z.string().uuid().brand('UUID')"
            typeScriptType: "UUID"
            import: "import { UUID } from './branded-types';"
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    validator: Annotated[
        str,
        Field(
            min_length=1,
            validation_alias=AliasChoices("validator", "ioTsType", "zodType"),
            description="Validator expression inserted verbatim into generated code",
        ),
    ]
    typescript_type: Annotated[
        str,
        Field(
            default="string",
            validation_alias=AliasChoices("typescript_type", "typeScriptType"),
            description="Static TypeScript type of the validated value",
        ),
    ]
    import_statement: Annotated[
        str,
        Field(
            default="",
            validation_alias=AliasChoices("import_statement", "import"),
            description="Import statement required by the validator expression",
        ),
    ]


class OutputSection(BaseModel):
    """Output layout settings.

    Example:
    -------
        ```yaml
        output:
          folder: "./generated"
          mode: "single"
          singleFileName: "schemas.ts"
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    folder: Annotated[
        str | None,
        Field(default=None, min_length=1, description="Output folder"),
    ]
    mode: Annotated[
        Literal["multiple", "single"] | None,
        Field(default=None, description="One file per DTO or a single file"),
    ]
    single_file_name: Annotated[
        str | None,
        Field(
            default=None,
            min_length=1,
            alias="singleFileName",
            description="File name used in single-file mode",
        ),
    ]


class GenerationSection(BaseModel):
    """Toggles for optional generated output.

    Example:
    -------
        ```yaml
        generation:
          generatePackageJson: false
          generateHelpers: true
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    generate_package_json: Annotated[
        bool | None,
        Field(default=None, alias="generatePackageJson"),
    ]
    generate_helpers: Annotated[
        bool | None,
        Field(default=None, alias="generateHelpers"),
    ]
    generate_partial_codecs: Annotated[
        bool | None,
        Field(default=None, alias="generatePartialCodecs"),
    ]


class DialectSection(BaseModel):
    """Settings block that may appear at top level or under a dialect key."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    output: OutputSection | None = None
    generation: GenerationSection | None = None
    custom_types: Annotated[
        dict[str, CustomTypeEntry],
        Field(default_factory=dict, alias="customTypes"),
    ]
    package_name: Annotated[
        str | None,
        Field(default=None, min_length=1, alias="packageName"),
    ]


class ForgeConfigDocument(DialectSection):
    """Root of a configuration file.

    Top-level settings apply to every dialect; a section keyed by the
    dialect name (``typescript``, ``typescript-zod``) is layered on top.

    Example:
    -------
        ```yaml
        output:
          mode: multiple
        typescript-zod:
          customTypes:
            uuid:
              zodType: "z.string().uuid()"
        ```

    """

    typescript: DialectSection | None = None
    typescript_zod: Annotated[
        DialectSection | None,
        Field(default=None, alias="typescript-zod"),
    ]

    @model_validator(mode="before")
    @classmethod
    def treat_null_as_empty(cls, data: object) -> object:
        """Accept an empty document (``None``) as an empty configuration."""
        return {} if data is None else data

    def sections_for(self, dialect_name: str) -> list[DialectSection]:
        """Sections that apply to a dialect, in the order they are applied.

        Args:
        ----
            dialect_name: Dialect language name.

        Returns:
        -------
            The document itself followed by the dialect section, if present.

        """
        specific = {
            "typescript": self.typescript,
            "typescript-zod": self.typescript_zod,
        }.get(dialect_name)
        return [self] if specific is None else [self, specific]
