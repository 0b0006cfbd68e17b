"""In-place rewrites of Draft 2020-12 node shapes into their Draft-4 forms."""

from __future__ import annotations

from typing import Any

_EXCLUSIVE_BOUNDS: tuple[tuple[str, str], ...] = (
    ("exclusiveMinimum", "minimum"),
    ("exclusiveMaximum", "maximum"),
)


def downgrade_to_draft4(node: dict[str, Any]) -> None:
    """Rewrite one node's own keywords to Draft-4; children are left alone.

    Applying it twice is harmless.
    """
    for exclusive, inclusive in _EXCLUSIVE_BOUNDS:
        bound = node.get(exclusive)
        if isinstance(bound, (int, float)) and not isinstance(bound, bool):
            node[inclusive] = bound
            node[exclusive] = True

    if "const" in node:
        node.setdefault("enum", [node.pop("const")])

    if "prefixItems" in node:
        trailing = node.pop("items", None)
        node["items"] = node.pop("prefixItems")
        if trailing is not None:
            node["additionalItems"] = trailing
