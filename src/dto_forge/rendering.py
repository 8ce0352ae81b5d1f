"""Jinja environment shared by everything that renders templates."""

from __future__ import annotations

import json
from pathlib import Path

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"


def create_environment() -> jinja2.Environment:
    """Environment over the bundled templates with a YAML quoting filter."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["yaml_quote"] = json.dumps
    return env
