"""Typed view of a MongoDB `$jsonSchema` document."""

from __future__ import annotations

from typing import Any, Literal, TypedDict, Union

JsonType = Literal["object", "array", "number", "boolean", "string", "null"]

BsonType = Literal[
    "double",
    "string",
    "object",
    "array",
    "binData",
    "objectId",
    "bool",
    "date",
    "null",
    "regex",
    "javascript",
    "int",
    "long",
    "decimal",
    "number",
]

# `not` is a reserved word, hence the functional form.
MongoSchema = TypedDict(
    "MongoSchema",
    {
        "additionalItems": Union[bool, "MongoSchema"],
        "additionalProperties": Union[bool, "MongoSchema"],
        "allOf": list["MongoSchema"],
        "anyOf": list["MongoSchema"],
        "bsonType": Union[BsonType, list[BsonType]],
        "dependencies": dict[str, Union[list[str], "MongoSchema"]],
        "description": str,
        "enum": list[Any],
        "exclusiveMaximum": bool,
        "exclusiveMinimum": bool,
        "items": Union["MongoSchema", list["MongoSchema"]],
        "maximum": float,
        "maxItems": int,
        "maxLength": int,
        "maxProperties": int,
        "minimum": float,
        "minItems": int,
        "minLength": int,
        "minProperties": int,
        "multipleOf": float,
        "not": "MongoSchema",
        "oneOf": list["MongoSchema"],
        "pattern": str,
        "patternProperties": dict[str, "MongoSchema"],
        "properties": dict[str, "MongoSchema"],
        "required": list[str],
        "title": str,
        "type": Union[JsonType, list[JsonType]],
        "uniqueItems": bool,
    },
    total=False,
)
