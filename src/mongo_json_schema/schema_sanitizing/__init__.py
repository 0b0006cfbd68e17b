"""Schema sanitizing exports."""

from .field_name_maps import FIELD_NAME_MAP_PREDICATES, is_field_name_map, is_schema_node
from .keyword_rules import (
    KEYWORD_ALLOW_LIST,
    SCHEMA_VALUED_KEYWORDS,
    UNSUPPORTED_KEYWORDS,
    is_allowed_keyword,
)
from .tree_sanitizer import sanitize_schema

__all__ = [
    "FIELD_NAME_MAP_PREDICATES",
    "KEYWORD_ALLOW_LIST",
    "SCHEMA_VALUED_KEYWORDS",
    "UNSUPPORTED_KEYWORDS",
    "is_allowed_keyword",
    "is_field_name_map",
    "is_schema_node",
    "sanitize_schema",
]
