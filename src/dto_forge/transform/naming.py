"""Naming conventions shared by the walker and the generators.

Examples:
  UserProfile          -> user-profile   (module / file name)
  status               -> StatusEnum     (property-level enum name)
  #/components/schemas/Address -> Address (reference name)
  first-name           -> 'first-name'   (object key needing quotes)
"""

from __future__ import annotations

import re

# Keys that can appear unquoted in a TypeScript object literal
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def to_kebab_case(name: str) -> str:
    """Lowercase ``name`` with a hyphen before every inner uppercase letter."""
    parts: list[str] = []
    for index, char in enumerate(name):
        if index > 0 and "A" <= char <= "Z":
            parts.append("-")
        parts.append(char)
    return "".join(parts).lower()


def to_pascal_case(name: str) -> str:
    """Uppercase the first character."""
    if not name:
        return name
    return name[:1].upper() + name[1:]


def enum_type_name(property_name: str) -> str:
    """Name of the enum type generated for a property-level enum."""
    return f"{to_pascal_case(property_name)}Enum"


def ref_name(ref: str) -> str:
    """Trailing path segment of a ``$ref`` pointer."""
    return ref.rsplit("/", 1)[-1]


def quote_literal(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def property_key(name: str) -> str:
    """Object literal key, quoted when ``name`` is not a plain identifier."""
    if _IDENTIFIER_RE.match(name):
        return name
    return quote_literal(name)


def comment_text(text: str) -> str:
    """``text`` with block-comment terminators broken up."""
    return text.replace("*/", "*\\/")
