"""Numeric subtype resolution exports."""

from .numeric_ranges import (
    FLOAT32_RANGE,
    FLOAT64_RANGE,
    INT32_RANGE,
    INT53_RANGE,
    INT64_RANGE,
    NumericRange,
)
from .numeric_type_resolver import NUMERIC_KINDS, resolve_numeric_type

__all__ = [
    "FLOAT32_RANGE",
    "FLOAT64_RANGE",
    "INT32_RANGE",
    "INT53_RANGE",
    "INT64_RANGE",
    "NUMERIC_KINDS",
    "NumericRange",
    "resolve_numeric_type",
]
