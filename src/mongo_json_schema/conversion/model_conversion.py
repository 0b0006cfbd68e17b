"""Conversion of pydantic types into MongoDB `$jsonSchema` documents."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, PydanticUserError, TypeAdapter
from pydantic.json_schema import JsonSchemaMode

from mongo_json_schema.schema_generation import Draft4JsonSchemaGenerator, SchemaConversionError
from mongo_json_schema.schema_sanitizing import sanitize_schema
from mongo_json_schema.schema_types import MongoSchema

_LOGGER = logging.getLogger(__name__)


def to_mongo_schema(
    schema_type: Any, *, mode: JsonSchemaMode = "validation", by_alias: bool = True
) -> MongoSchema:
    """Convert a pydantic model or annotated type into a MongoDB schema.

    Args:
      schema_type: A ``BaseModel`` subclass, a ``TypeAdapter``, or any type
        ``TypeAdapter`` accepts. ``None`` yields an empty schema.
      mode: pydantic JSON Schema mode.
      by_alias: Use field aliases as property names.

    Returns:
      A document ready for ``{"$jsonSchema": ...}``.

    Raises:
      SchemaConversionError: If the type uses designators or shapes MongoDB
        cannot express, or pydantic cannot build a schema for it.
    """
    if schema_type is None:
        return {}

    raw_schema = _generate_raw_schema(schema_type, mode=mode, by_alias=by_alias)
    _LOGGER.debug("Generated raw JSON Schema for %r", schema_type)
    return sanitize_json_schema(raw_schema)


def sanitize_json_schema(raw_schema: Mapping[str, Any] | None) -> MongoSchema:
    """Sanitize an already generated Draft-4 JSON Schema document."""
    if not raw_schema:
        return {}
    if not isinstance(raw_schema, Mapping):
        raise SchemaConversionError("JSON Schema root must be an object.")
    return cast(MongoSchema, sanitize_schema(raw_schema))


def _generate_raw_schema(
    schema_type: Any, *, mode: JsonSchemaMode, by_alias: bool
) -> dict[str, Any]:
    try:
        if isinstance(schema_type, type) and issubclass(schema_type, BaseModel):
            return schema_type.model_json_schema(
                by_alias=by_alias, mode=mode, schema_generator=Draft4JsonSchemaGenerator
            )
        adapter = schema_type if isinstance(schema_type, TypeAdapter) else TypeAdapter(schema_type)
        return adapter.json_schema(
            by_alias=by_alias, mode=mode, schema_generator=Draft4JsonSchemaGenerator
        )
    except PydanticUserError as exc:
        raise SchemaConversionError(f"Cannot build a JSON Schema for {schema_type!r}: {exc}") from exc
