"""Keyword sets of the MongoDB `$jsonSchema` dialect."""

from __future__ import annotations

# https://www.mongodb.com/docs/manual/reference/operator/query/jsonSchema/#available-keywords
KEYWORD_ALLOW_LIST: frozenset[str] = frozenset(
    {
        # structural
        "type",
        "bsonType",
        "properties",
        "items",
        "additionalItems",
        "additionalProperties",
        "patternProperties",
        "required",
        # combinators
        "allOf",
        "anyOf",
        "oneOf",
        "not",
        # bounds
        "minimum",
        "maximum",
        "exclusiveMinimum",
        "exclusiveMaximum",
        "multipleOf",
        "minLength",
        "maxLength",
        "minItems",
        "maxItems",
        "minProperties",
        "maxProperties",
        "uniqueItems",
        "pattern",
        # metadata
        "title",
        "description",
        "enum",
        "dependencies",
    }
)

# https://www.mongodb.com/docs/manual/reference/operator/query/jsonSchema/#omissions
UNSUPPORTED_KEYWORDS: frozenset[str] = frozenset(
    {"$ref", "$schema", "default", "definitions", "format", "id"}
)

# Keywords whose value holds nested schema nodes or a field-name map. Values of
# every other allowed keyword (enum members, required names...) are data.
SCHEMA_VALUED_KEYWORDS: frozenset[str] = frozenset(
    {
        "properties",
        "patternProperties",
        "dependencies",
        "items",
        "additionalItems",
        "additionalProperties",
        "allOf",
        "anyOf",
        "oneOf",
        "not",
    }
)

SCHEMA_KEYWORDS: frozenset[str] = KEYWORD_ALLOW_LIST | UNSUPPORTED_KEYWORDS


def is_allowed_keyword(key: str) -> bool:
    """Return True when MongoDB accepts ``key`` as a schema keyword."""
    return key in KEYWORD_ALLOW_LIST
