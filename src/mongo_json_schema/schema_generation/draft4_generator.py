"""pydantic JSON Schema generator targeting Draft-4 with designator checks."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic.json_schema import GenerateJsonSchema, JsonRef, JsonSchemaMode, JsonSchemaValue
from pydantic_core import CoreSchema

from .designator_checks import check_node_designators
from .draft4_shapes import downgrade_to_draft4
from .ref_inlining import inline_references

if TYPE_CHECKING:
    from pydantic.json_schema import CoreSchemaOrField

NodeHook = Callable[[Mapping[str, Any], Mapping[str, Any]], None]


class Draft4JsonSchemaGenerator(GenerateJsonSchema):
    """Emit self-contained Draft-4 shaped schemas.

    Every node is rewritten to Draft-4 and handed to ``node_hook`` together
    with the core schema it was built from. ``$defs`` references are inlined
    once generation finishes, so the result never contains ``$ref``.
    """

    node_hook: ClassVar[NodeHook] = staticmethod(check_node_designators)

    def generate(self, schema: CoreSchema, mode: JsonSchemaMode = "validation") -> JsonSchemaValue:
        json_schema = super().generate(schema, mode=mode)
        definitions = json_schema.pop("$defs", {})
        return inline_references(json_schema, definitions)

    def generate_inner(self, schema: CoreSchemaOrField) -> JsonSchemaValue:
        json_schema = super().generate_inner(schema)
        downgrade_to_draft4(json_schema)
        self.node_hook(schema, self._node_view(json_schema))
        return json_schema

    def _node_view(self, json_schema: JsonSchemaValue) -> Mapping[str, Any]:
        reference = json_schema.get("$ref")
        if not isinstance(reference, str):
            return json_schema
        try:
            definition = self.get_schema_from_definitions(JsonRef(reference))
        except KeyError:
            return json_schema
        if definition is None:
            return json_schema
        downgrade_to_draft4(definition)
        siblings = {key: value for key, value in json_schema.items() if key != "$ref"}
        return {**definition, **siblings}
