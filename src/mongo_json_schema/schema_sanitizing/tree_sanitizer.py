"""Recursive rewrite of a Draft-4 JSON Schema tree into the `$jsonSchema` dialect."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from mongo_json_schema.numeric_resolution import NUMERIC_KINDS, resolve_numeric_type

from .field_name_maps import is_field_name_map
from .keyword_rules import SCHEMA_VALUED_KEYWORDS, is_allowed_keyword

_LOGGER = logging.getLogger(__name__)


def sanitize_schema(node: Any, inside_field_name_map: bool = False) -> Any:
    """Return a MongoDB-compatible copy of a JSON Schema node.

    Keywords outside the allow-list are dropped, numeric and boolean kinds are
    turned into BSON subtypes, and keys of ``properties``,
    ``patternProperties`` and ``dependencies`` maps are kept verbatim since
    they are user field names rather than keywords. The input is never
    modified.

    Args:
      node: A schema node, a list of nodes, or a primitive.
      inside_field_name_map: True when ``node`` is itself a field-name map.

    Returns:
      The rebuilt node.
    """
    if isinstance(node, (list, tuple)):
        return [sanitize_schema(element, inside_field_name_map) for element in node]

    if not isinstance(node, Mapping):
        return node

    sanitized: dict[str, Any] = {}
    for key, value in node.items():
        if inside_field_name_map:
            # Values of a field-name map are field schemas, never nested maps.
            sanitized[key] = sanitize_schema(value)
            continue
        if not is_allowed_keyword(key):
            _LOGGER.debug("Dropping unsupported schema keyword %r", key)
            continue
        if key in SCHEMA_VALUED_KEYWORDS:
            sanitized[key] = sanitize_schema(value, is_field_name_map(key, value))
        else:
            sanitized[key] = copy.deepcopy(value)

    if not inside_field_name_map:
        _designate_bson_type(sanitized)
    return sanitized


def _designate_bson_type(node: dict[str, Any]) -> None:
    declared_kind = node.get("type")
    subtype = node.get("bsonType")

    if _is_one_of(declared_kind, NUMERIC_KINDS) or _is_one_of(subtype, NUMERIC_KINDS):
        node["bsonType"] = resolve_numeric_type(node)
        node.pop("type", None)
    elif declared_kind == "boolean":
        node["bsonType"] = resolve_numeric_type(node)
        del node["type"]

    # `number` is always spelled with `type`.
    if node.get("type") == "number" or node.get("bsonType") == "number":
        node.pop("bsonType", None)
        node["type"] = "number"


def _is_one_of(value: Any, kinds: frozenset[str]) -> bool:
    return isinstance(value, str) and value in kinds
