"""Construction-time checks on `type`/`bsonType` designators."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .generation_errors import DesignatorMisuseError, DualDesignationError

UNTYPED_KIND = "any"

# Core schema wrappers that do not change the kind of the value they wrap.
_TRANSPARENT_WRAPPERS: Mapping[str, str] = {
    "model-field": "schema",
    "dataclass-field": "schema",
    "typed-dict-field": "schema",
    "computed-field": "return_schema",
    "default": "schema",
    "definitions": "schema",
    "function-after": "schema",
    "function-before": "schema",
    "function-wrap": "schema",
}


def typed_kind(core_schema: Mapping[str, Any]) -> Any:
    """Return the core schema type behind field and validator wrappers."""
    current = core_schema
    while current.get("type") in _TRANSPARENT_WRAPPERS:
        inner = current.get(_TRANSPARENT_WRAPPERS[current["type"]])
        if not isinstance(inner, Mapping):
            break
        current = inner
    return current.get("type")


def check_node_designators(core_schema: Mapping[str, Any], json_schema: Mapping[str, Any]) -> None:
    """Reject designator combinations MongoDB cannot interpret.

    Runs once per node while pydantic builds the JSON Schema, after caller
    metadata (``json_schema_extra``) has been merged into ``json_schema``.

    Raises:
      DesignatorMisuseError: If ``bsonType`` is set on anything but ``typing.Any``.
      DualDesignationError: If ``type`` and ``bsonType`` are both present.
    """
    if "bsonType" not in json_schema:
        return
    if typed_kind(core_schema) != UNTYPED_KIND:
        raise DesignatorMisuseError("`bsonType` can only be used with `typing.Any`.")
    if "type" in json_schema:
        raise DualDesignationError("Cannot specify both `type` and `bsonType` simultaneously.")
