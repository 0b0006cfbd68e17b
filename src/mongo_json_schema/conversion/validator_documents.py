"""Builders for MongoDB validator and `collMod` command documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

VALIDATION_LEVELS: tuple[str, ...] = ("strict", "moderate", "off")
VALIDATION_ACTIONS: tuple[str, ...] = ("error", "warn")


def build_validator_document(schema: Mapping[str, Any]) -> dict[str, Any]:
    """Wrap a schema in a `$jsonSchema` query operator."""
    return {"$jsonSchema": dict(schema)}


def build_collection_command(
    collection: str,
    schema: Mapping[str, Any],
    *,
    validation_level: str = "strict",
    validation_action: str = "error",
) -> dict[str, Any]:
    """Build a `collMod` command attaching ``schema`` to ``collection``.

    Raises:
      ValueError: If the collection name is blank or the level/action is unknown.
    """
    if not collection.strip():
        raise ValueError("Collection name must not be empty.")
    if validation_level not in VALIDATION_LEVELS:
        raise ValueError(
            f"Unsupported validation level '{validation_level}'; "
            f"expected one of {', '.join(VALIDATION_LEVELS)}."
        )
    if validation_action not in VALIDATION_ACTIONS:
        raise ValueError(
            f"Unsupported validation action '{validation_action}'; "
            f"expected one of {', '.join(VALIDATION_ACTIONS)}."
        )
    return {
        "collMod": collection,
        "validator": build_validator_document(schema),
        "validationLevel": validation_level,
        "validationAction": validation_action,
    }
