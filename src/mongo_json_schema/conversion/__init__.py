"""Conversion exports."""

from .document_rendering import OUTPUT_FORMATS, render_document
from .model_conversion import sanitize_json_schema, to_mongo_schema
from .target_loading import TargetLoadError, load_schema_target
from .validator_documents import (
    VALIDATION_ACTIONS,
    VALIDATION_LEVELS,
    build_collection_command,
    build_validator_document,
)

__all__ = [
    "OUTPUT_FORMATS",
    "VALIDATION_ACTIONS",
    "VALIDATION_LEVELS",
    "TargetLoadError",
    "build_collection_command",
    "build_validator_document",
    "load_schema_target",
    "render_document",
    "sanitize_json_schema",
    "to_mongo_schema",
]
