"""Structural predicates telling field-name maps apart from schema nodes."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .keyword_rules import SCHEMA_KEYWORDS


def is_schema_node(value: Any) -> bool:
    """Return True for a mapping shaped like a JSON Schema node.

    A node qualifies when it is empty (the schema of an untyped value) or
    carries at least one JSON Schema keyword. ``type``/``bsonType`` are the
    usual markers; untyped and union-shaped nodes only carry ``title`` or
    ``anyOf``.
    """
    if not isinstance(value, Mapping):
        return False
    return not value or any(key in SCHEMA_KEYWORDS for key in value)


def _is_properties_map(value: Any) -> bool:
    return isinstance(value, Mapping) and all(is_schema_node(child) for child in value.values())


def _is_pattern_properties_map(value: Any) -> bool:
    return isinstance(value, Mapping) and all(
        isinstance(child, Mapping) for child in value.values()
    )


def _is_dependencies_map(value: Any) -> bool:
    return isinstance(value, Mapping) and all(
        _is_name_list(child) or is_schema_node(child) for child in value.values()
    )


def _is_name_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


FIELD_NAME_MAP_PREDICATES: Mapping[str, Callable[[Any], bool]] = {
    "properties": _is_properties_map,
    "patternProperties": _is_pattern_properties_map,
    "dependencies": _is_dependencies_map,
}


def is_field_name_map(key: str, value: Any) -> bool:
    """Return True when ``value`` under ``key`` maps user field names to schemas."""
    predicate = FIELD_NAME_MAP_PREDICATES.get(key)
    return predicate is not None and predicate(value)
