"""Resolution of JSON Schema numeric kinds into BSON numeric subtypes."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .numeric_ranges import (
    FLOAT32_RANGE,
    FLOAT64_RANGE,
    INT32_RANGE,
    INT53_RANGE,
    INT64_RANGE,
    NumericRange,
)

NUMERIC_KINDS: frozenset[str] = frozenset({"integer", "number"})


def resolve_numeric_type(node: MutableMapping[str, Any]) -> Any:
    """Return the BSON subtype for a numeric-shaped schema node.

    Bounds made redundant by the chosen subtype are deleted from ``node`` in
    place; bounds are never added. Nodes that are not numeric are returned
    with their declared kind untouched.

    Args:
      node: Schema node carrying ``type`` or ``bsonType`` plus optional
        ``minimum``/``maximum``.

    Returns:
      One of ``"int"``, ``"long"``, ``"double"``, ``"number"``, ``"bool"`` or
      the node's own kind when it is neither numeric nor boolean.
    """
    kind = node.get("type")
    if kind is None:
        kind = node.get("bsonType")

    if kind == "integer":
        return _resolve_integer(node)
    if kind == "number":
        return _resolve_number(node)
    if kind == "boolean":
        return "bool"
    return kind


def _resolve_integer(node: MutableMapping[str, Any]) -> str:
    minimum = node.get("minimum")
    maximum = node.get("maximum")

    if (
        (minimum is None and maximum is None)
        or INT32_RANGE.matches(minimum, maximum)
        or INT53_RANGE.matches(minimum, maximum)
    ):
        effective_maximum = INT53_RANGE.maximum if maximum is None else maximum
        _drop_bounds(node)
        return "int" if effective_maximum <= INT32_RANGE.maximum else "long"

    # A single bound says nothing about the width.
    if minimum is None or maximum is None:
        return "number"
    if not (_is_number(minimum) and _is_number(maximum)):
        return "number"

    if INT32_RANGE.contains(minimum, maximum):
        # Int32 annotations narrowed on one side still carry the other int32 limit.
        _drop_canonical_bounds(node, INT32_RANGE)
        return "int"
    if INT64_RANGE.contains(minimum, maximum):
        _drop_canonical_bounds(node, INT53_RANGE)
        return "long"

    # Wider than 64 bits, keep the caller's bounds.
    return "number"


def _resolve_number(node: MutableMapping[str, Any]) -> str:
    minimum = node.get("minimum")
    maximum = node.get("maximum")

    if FLOAT32_RANGE.matches(minimum, maximum):
        return "double"
    if FLOAT64_RANGE.matches(minimum, maximum):
        _drop_bounds(node)
        return "double"
    return "number"


def _drop_bounds(node: MutableMapping[str, Any]) -> None:
    node.pop("minimum", None)
    node.pop("maximum", None)


def _drop_canonical_bounds(node: MutableMapping[str, Any], canonical: NumericRange) -> None:
    if "minimum" in node and canonical.matches(node["minimum"], canonical.maximum):
        del node["minimum"]
    if "maximum" in node and canonical.matches(canonical.minimum, node["maximum"]):
        del node["maximum"]


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
