"""Schema generation exports."""

from .designator_checks import check_node_designators, typed_kind
from .draft4_generator import Draft4JsonSchemaGenerator
from .draft4_shapes import downgrade_to_draft4
from .generation_errors import (
    DesignatorMisuseError,
    DualDesignationError,
    RecursiveSchemaError,
    SchemaConversionError,
)
from .ref_inlining import inline_references

__all__ = [
    "DesignatorMisuseError",
    "Draft4JsonSchemaGenerator",
    "DualDesignationError",
    "RecursiveSchemaError",
    "SchemaConversionError",
    "check_node_designators",
    "downgrade_to_draft4",
    "inline_references",
    "typed_kind",
]
