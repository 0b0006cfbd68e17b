"""Schema type exports."""

from .bson_annotations import (
    Date,
    Decimal128,
    Double,
    Float32,
    Int32,
    Long,
    ObjectId,
    bson_type,
)
from .mongo_schema_models import BsonType, JsonType, MongoSchema

__all__ = [
    "BsonType",
    "Date",
    "Decimal128",
    "Double",
    "Float32",
    "Int32",
    "JsonType",
    "Long",
    "MongoSchema",
    "ObjectId",
    "bson_type",
]
