"""Text rendering of schema documents."""

from __future__ import annotations

import json
from typing import Any

import yaml

OUTPUT_FORMATS: tuple[str, ...] = ("json", "yaml")


def render_document(document: Any, output_format: str = "json", indent: int = 2) -> str:
    """Render ``document`` as JSON or YAML text, preserving key order."""
    if output_format == "json":
        return json.dumps(document, indent=indent, ensure_ascii=False)
    if output_format == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True, indent=indent)
    raise ValueError(f"Unsupported output format: {output_format}")

