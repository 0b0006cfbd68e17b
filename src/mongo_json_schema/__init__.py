"""Convert pydantic schemas into MongoDB `$jsonSchema` validators."""

import logging

from .conversion import (
    build_collection_command,
    build_validator_document,
    sanitize_json_schema,
    to_mongo_schema,
)
from .schema_generation import (
    DesignatorMisuseError,
    DualDesignationError,
    RecursiveSchemaError,
    SchemaConversionError,
)
from .schema_types import (
    Date,
    Decimal128,
    Double,
    Float32,
    Int32,
    Long,
    MongoSchema,
    ObjectId,
    bson_type,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Date",
    "Decimal128",
    "DesignatorMisuseError",
    "Double",
    "DualDesignationError",
    "Float32",
    "Int32",
    "Long",
    "MongoSchema",
    "ObjectId",
    "RecursiveSchemaError",
    "SchemaConversionError",
    "bson_type",
    "build_collection_command",
    "build_validator_document",
    "sanitize_json_schema",
    "to_mongo_schema",
]
