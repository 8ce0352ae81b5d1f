"""CLI module for dto-forge."""

from dto_forge.cli.error_formatter import ErrorFormatter, ErrorTable
from dto_forge.cli.exception_handler import handle_exceptions

__all__ = [
    "ErrorFormatter",
    "ErrorTable",
    "handle_exceptions",
]
