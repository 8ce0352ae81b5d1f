"""Translate Pydantic errors in config documents to readable messages."""

from __future__ import annotations

from pydantic import ValidationError
from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This field is not allowed in this context",
    "string_type": "Must be a string",
    "bool_type": "Must be true or false",
    "bool_parsing": "Must be true or false",
    "dict_type": "Must be a mapping",
    "model_type": "Must be a mapping",
    "literal_error": "Must be one of the allowed values",
    "string_too_short": "Must not be empty",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    if error_type == "literal_error":
        return f"Must be one of: {ctx.get('expected', 'unknown')}"

    return ERROR_TRANSLATIONS.get(error_type, error["msg"])


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def describe_validation_error(exc: ValidationError) -> list[str]:
    """Flatten a ValidationError into ``location: message`` lines.

    Args:
    ----
        exc: Error raised by ``model_validate``.

    Returns:
    -------
        One line per underlying error, in Pydantic's order.

    """
    lines: list[str] = []
    for error in exc.errors():
        location = format_pydantic_location(error["loc"])
        message = translate_pydantic_error(error)
        lines.append(f"{location}: {message}" if location else message)
    return lines
