"""Schema loading and type flattening service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from typextract.configuration.runtime_settings import SchemaConfig

from .schema_models import SchemaDocument, SchemaNode

ROOT_POINTER = "#"


class SchemaError(Exception):
    """Raised for schema parsing or flattening failures."""


def load_schema_document(config: SchemaConfig) -> SchemaDocument:
    """Parse schema text into a structured document."""
    try:
        root = json.loads(config.text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON schema: {exc}") from exc

    if not isinstance(root, Mapping):
        raise SchemaError("JSON schema root must be an object.")
    source = str(config.source_path) if config.source_path else None
    return SchemaDocument(root=root, source=source)


def parse_schema_node(node: Any, *, path: str = ROOT_POINTER) -> SchemaNode:
    """Build a SchemaNode tree from a decoded JSON schema mapping."""
    if not isinstance(node, Mapping):
        raise SchemaError(f"JSON schema node at {path} must be an object.")

    reference = node.get("$ref", "")
    if not isinstance(reference, str):
        raise SchemaError(f"$ref at {path} must be a string.")

    properties = _parse_children(node.get("properties"), f"{path}/properties")
    definitions = _parse_children(node.get("definitions"), f"{path}/definitions")
    defs = _parse_children(node.get("$defs"), f"{path}/$defs")

    items_value = node.get("items")
    items = None
    if isinstance(items_value, Mapping):
        items = parse_schema_node(items_value, path=f"{path}/items")

    minimum, exclusive_minimum = _numeric_bound(
        node.get("minimum"), node.get("exclusiveMinimum")
    )
    maximum, exclusive_maximum = _numeric_bound(
        node.get("maximum"), node.get("exclusiveMaximum")
    )

    return SchemaNode(
        type=_schema_kind(node),
        properties=properties,
        items=items,
        reference=reference,
        required=_string_tuple(node.get("required"), f"{path}/required"),
        title=_text(node.get("title")),
        description=_text(node.get("description")),
        definitions=definitions,
        defs=defs,
        min_length=_int(node.get("minLength")),
        max_length=_int(node.get("maxLength")),
        pattern=_text(node.get("pattern")),
        multiple_of=_number(node.get("multipleOf")) or 0,
        minimum=minimum,
        maximum=maximum,
        exclusive_minimum=exclusive_minimum,
        exclusive_maximum=exclusive_maximum,
        min_items=_int(node.get("minItems")),
        max_items=_int(node.get("maxItems")),
    )


def load_schema_node(config: SchemaConfig) -> SchemaNode:
    """Load schema text and return the root SchemaNode."""
    return parse_schema_node(load_schema_document(config).root)


def extract_types(root: SchemaNode) -> dict[str, SchemaNode]:
    """Return every object-bearing node keyed by its pointer path.

    Array nodes register their items under the array's own path, so an inline
    array of objects at ``#/properties/tags`` is found at that path.
    """
    types: dict[str, SchemaNode] = {}
    _add_type_and_children(ROOT_POINTER, root, types)
    return types


def _add_type_and_children(path: str, node: SchemaNode, types: dict[str, SchemaNode]) -> None:
    if node.type == "array":
        if node.items is not None:
            _add_type_and_children(path, node.items, types)
        return

    if node.type == "object" or node.properties:
        types[path] = node

    for name, definition in node.definitions.items():
        _add_type_and_children(f"{path}/definitions/{name}", definition, types)
    for name, definition in node.defs.items():
        _add_type_and_children(f"{path}/$defs/{name}", definition, types)
    for name, child in node.properties.items():
        _add_type_and_children(f"{path}/properties/{name}", child, types)


def _parse_children(value: Any, path: str) -> dict[str, SchemaNode]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SchemaError(f"{path} must be an object.")
    return {
        str(name): parse_schema_node(child, path=f"{path}/{name}") for name, child in value.items()
    }


def _schema_kind(node: Mapping[str, Any]) -> str:
    node_type = node.get("type")
    if isinstance(node_type, list):
        filtered = [value for value in node_type if isinstance(value, str) and value != "null"]
        if len(filtered) == 1:
            return filtered[0]
        if not filtered and node_type:
            return "null"
        return ""
    if isinstance(node_type, str):
        return node_type
    if "properties" in node:
        return "object"
    if "items" in node:
        return "array"
    return ""


def _numeric_bound(bound: Any, exclusive: Any) -> tuple[float | None, bool]:
    # Draft 6+ carries the bound itself in exclusiveMinimum/exclusiveMaximum.
    if _number(exclusive) is not None:
        return _number(exclusive), True
    return _number(bound), exclusive is True


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return value


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _string_tuple(value: Any, path: str) -> tuple[str, ...]:
    if value is None or isinstance(value, bool):
        return ()
    if not isinstance(value, list):
        raise SchemaError(f"{path} must be a list of property names.")
    return tuple(item for item in value if isinstance(item, str))


def _reject_constant(name: str) -> Any:
    raise SchemaError(f"Invalid JSON schema: non-finite number {name} is not allowed.")
