"""Errors raised while generating a MongoDB schema."""

from __future__ import annotations


class SchemaConversionError(Exception):
    """Raised when a schema cannot be expressed as a MongoDB `$jsonSchema`."""


class DesignatorMisuseError(SchemaConversionError):
    """Raised when `bsonType` is attached to a structurally typed node."""


class DualDesignationError(SchemaConversionError):
    """Raised when a node carries both `type` and `bsonType`."""


class RecursiveSchemaError(SchemaConversionError):
    """Raised when a definition references itself and cannot be inlined."""
