"""Schema management exports."""

from .schema_models import SchemaDocument, SchemaNode
from .schema_projection import (
    SchemaError,
    extract_types,
    load_schema_document,
    load_schema_node,
    parse_schema_node,
)

__all__ = [
    "SchemaDocument",
    "SchemaError",
    "SchemaNode",
    "extract_types",
    "load_schema_document",
    "load_schema_node",
    "parse_schema_node",
]
