"""Inlining of local `$defs` references."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .generation_errors import RecursiveSchemaError, SchemaConversionError

_LOGGER = logging.getLogger(__name__)

DEFS_POINTER_PREFIX = "#/$defs/"


def inline_references(json_schema: Any, definitions: Mapping[str, Any]) -> Any:
    """Replace every ``{"$ref": "#/$defs/<name>"}`` with a copy of its definition.

    Keys next to ``$ref`` override the keys of the referenced definition.

    Raises:
      RecursiveSchemaError: If a definition refers back to itself.
      SchemaConversionError: If a reference points outside ``definitions``.
    """
    return _inline(json_schema, definitions, trail=())


def _inline(node: Any, definitions: Mapping[str, Any], trail: tuple[str, ...]) -> Any:
    if isinstance(node, list):
        return [_inline(element, definitions, trail) for element in node]
    if not isinstance(node, Mapping):
        return node

    reference = node.get("$ref")
    if not isinstance(reference, str):
        return {key: _inline(value, definitions, trail) for key, value in node.items()}

    name = _definition_name(reference)
    if name in trail:
        cycle = " -> ".join((*trail[trail.index(name) :], name))
        raise RecursiveSchemaError(
            f"Recursive schema cannot be expressed without `$ref`: {cycle}"
        )
    if name not in definitions:
        raise SchemaConversionError(f"Unresolvable schema reference: {reference}")

    _LOGGER.debug("Inlining schema reference %s", reference)
    inlined = _inline(definitions[name], definitions, (*trail, name))
    for key, value in node.items():
        if key != "$ref":
            inlined[key] = _inline(value, definitions, trail)
    return inlined


def _definition_name(reference: str) -> str:
    if not reference.startswith(DEFS_POINTER_PREFIX):
        raise SchemaConversionError(f"Unsupported schema reference: {reference}")
    return reference[len(DEFS_POINTER_PREFIX) :].replace("~1", "/").replace("~0", "~")
