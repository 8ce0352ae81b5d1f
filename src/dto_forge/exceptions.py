"""Exception hierarchy for dto-forge."""

from __future__ import annotations

from pathlib import Path


class DtoForgeError(Exception):
    """Base class for all dto-forge errors."""


class LoaderError(DtoForgeError):
    """Error during YAML/JSON file loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize LoaderError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class ConfigurationError(DtoForgeError):
    """Invalid configuration document or generation settings.

    Raised before any output file is written.
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        details: list[str] | None = None,
    ) -> None:
        """Initialize ConfigurationError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the offending config file.
            details: Individual problems found in the document.

        """
        self.path = path
        self.details = details or []
        super().__init__(f"{path}: {message}" if path else message)


class RegistryFrozenError(DtoForgeError):
    """A custom type was registered after the registry load phase ended."""


class SchemaRecursionError(DtoForgeError):
    """An inline schema contains itself or nests deeper than allowed."""

    def __init__(self, message: str, path: str) -> None:
        """Initialize SchemaRecursionError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Dotted path of the schema node where walking stopped.

        """
        self.path = path
        super().__init__(f"{path}: {message}")


class RenderError(DtoForgeError):
    """Code for a DTO or one of its properties could not be rendered."""

    def __init__(
        self,
        message: str,
        dto_name: str,
        property_name: str | None = None,
    ) -> None:
        """Initialize RenderError.

        Args:
        ----
            message: Underlying failure.
            dto_name: Name of the DTO being rendered.
            property_name: Name of the property being rendered, if any.

        """
        self.dto_name = dto_name
        self.property_name = property_name
        location = dto_name if property_name is None else f"{dto_name}.{property_name}"
        super().__init__(f"failed to render {location}: {message}")


class OutputWriteError(DtoForgeError):
    """An output directory or file could not be written."""

    def __init__(self, message: str, path: Path) -> None:
        """Initialize OutputWriteError.

        Args:
        ----
            message: Underlying I/O failure.
            path: Path that could not be created or written.

        """
        self.path = path
        super().__init__(f"{path}: {message}")
