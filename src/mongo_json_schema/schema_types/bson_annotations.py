"""Annotated types that steer numeric and BSON subtype resolution."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field

from mongo_json_schema.numeric_resolution import (
    FLOAT32_RANGE,
    FLOAT64_RANGE,
    INT32_RANGE,
    INT53_RANGE,
)

from .mongo_schema_models import BsonType

Int32 = Annotated[int, Field(ge=INT32_RANGE.minimum, le=INT32_RANGE.maximum)]
"""32-bit signed integer, stored as BSON `int`."""

Long = Annotated[int, Field(ge=INT53_RANGE.minimum, le=INT53_RANGE.maximum)]
"""Safe (53-bit) integer, stored as BSON `long`."""

Float32 = Annotated[float, Field(ge=FLOAT32_RANGE.minimum, le=FLOAT32_RANGE.maximum)]
"""Single precision float, stored as BSON `double` with its range kept."""

Double = Annotated[float, Field(ge=FLOAT64_RANGE.minimum, le=FLOAT64_RANGE.maximum)]
"""Double precision float, stored as BSON `double`."""


def bson_type(name: BsonType, **metadata: Any) -> Any:
    """Return an untyped annotation pinned to a BSON subtype.

    ``bsonType`` is only accepted on ``typing.Any``, so the subtype cannot
    contradict a structural type.

    Example:
      ``owner_id: bson_type("objectId", description="Owning account")``
    """
    return Annotated[Any, Field(json_schema_extra={"bsonType": name, **metadata})]


ObjectId = bson_type("objectId")
Date = bson_type("date")
Decimal128 = bson_type("decimal")
