"""Import-path resolution of schema targets."""

from __future__ import annotations

import importlib
from typing import Any


class TargetLoadError(Exception):
    """Raised when a `module:attribute` schema target cannot be resolved."""


def load_schema_target(reference: str) -> Any:
    """Import ``package.module:Name`` (``Name`` may be dotted) and return the object."""
    module_name, separator, attribute_path = reference.strip().partition(":")
    if not separator or not module_name or not attribute_path:
        raise TargetLoadError(
            f"Schema target '{reference}' must look like 'package.module:Name'."
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetLoadError(f"Cannot import module '{module_name}': {exc}") from exc

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise TargetLoadError(
                f"Module '{module_name}' has no attribute '{attribute_path}'."
            ) from exc
    return target
