"""Validation-library dialects available to the code generator."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from dto_forge.dialects.base import PRIMITIVE_KEYS, Dialect
from dto_forge.dialects.io_ts import IO_TS
from dto_forge.dialects.zod import ZOD
from dto_forge.exceptions import ConfigurationError

DIALECTS: Mapping[str, Dialect] = MappingProxyType({d.name: d for d in (IO_TS, ZOD)})

DEFAULT_DIALECT = IO_TS.name


def available_dialects() -> list[str]:
    """Names of all registered dialects, sorted."""
    return sorted(DIALECTS)


def get_dialect(name: str) -> Dialect:
    """Look up a dialect by language name.

    Raises
    ------
        ConfigurationError: If no dialect has that name.

    """
    try:
        return DIALECTS[name]
    except KeyError:
        raise ConfigurationError(
            f"no generator found for language: {name} "
            f"(available: {', '.join(available_dialects())})"
        ) from None


__all__ = [
    "DEFAULT_DIALECT",
    "DIALECTS",
    "Dialect",
    "IO_TS",
    "PRIMITIVE_KEYS",
    "ZOD",
    "available_dialects",
    "get_dialect",
]
