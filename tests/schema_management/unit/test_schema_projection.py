"""Schema management service tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typextract.configuration.runtime_settings import SchemaConfig
from typextract.schema_management.schema_projection import (
    SchemaError,
    extract_types,
    load_schema_document,
    load_schema_node,
    parse_schema_node,
)


def _schema_config(text: str, source_path: Path | None = None) -> SchemaConfig:
    return SchemaConfig(text=text, source_path=source_path)


def test_parses_inspected_keywords() -> None:
    node = parse_schema_node(
        {
            "title": "Product",
            "type": "object",
            "required": ["id"],
            "properties": {
                "id": {"type": "integer", "minimum": 1, "maximum": 10, "multipleOf": 2},
                "code": {"type": "string", "minLength": 2, "maxLength": 8, "pattern": "^X"},
                "tags": {"type": "array", "items": {"type": "string"}, "minItems": 1},
                "owner": {"$ref": "#/definitions/user"},
            },
        }
    )

    assert node.type == "object"
    assert node.title == "Product"
    assert node.required == ("id",)
    assert node.properties["id"].minimum == 1
    assert node.properties["id"].maximum == 10
    assert node.properties["id"].multiple_of == 2
    assert node.properties["code"].min_length == 2
    assert node.properties["code"].max_length == 8
    assert node.properties["code"].pattern == "^X"
    assert node.properties["tags"].items is not None
    assert node.properties["tags"].items.type == "string"
    assert node.properties["tags"].min_items == 1
    assert node.properties["owner"].reference == "#/definitions/user"


def test_draft4_boolean_exclusive_bounds() -> None:
    node = parse_schema_node({"type": "number", "minimum": 0, "exclusiveMinimum": True})

    assert node.minimum == 0
    assert node.exclusive_minimum is True
    assert node.maximum is None
    assert node.exclusive_maximum is False


def test_numeric_exclusive_bounds_are_normalized() -> None:
    node = parse_schema_node({"type": "number", "exclusiveMaximum": 5})

    assert node.maximum == 5
    assert node.exclusive_maximum is True


def test_type_inference_and_nullable_lists() -> None:
    assert parse_schema_node({"type": ["string", "null"]}).type == "string"
    assert parse_schema_node({"type": ["string", "integer"]}).type == ""
    assert parse_schema_node({"type": ["null"]}).type == "null"
    assert parse_schema_node({"properties": {}}).type == "object"
    assert parse_schema_node({"items": {"type": "string"}}).type == "array"
    assert parse_schema_node({}).type == ""


def test_extract_types_registers_object_bearing_nodes() -> None:
    root = parse_schema_node(
        {
            "type": "object",
            "definitions": {
                "address": {"type": "object", "properties": {"street": {"type": "string"}}},
                "label": {"type": "string"},
            },
            "$defs": {"meta": {"type": "object"}},
            "properties": {
                "nested": {
                    "type": "object",
                    "properties": {"deep": {"type": "object", "properties": {}}},
                },
                "lines": {
                    "type": "array",
                    "items": {"type": "object", "properties": {"sku": {"type": "string"}}},
                },
                "tags": {"type": "array", "items": {"type": "string"}},
            },
        }
    )

    types = extract_types(root)

    assert sorted(types) == [
        "#",
        "#/$defs/meta",
        "#/definitions/address",
        "#/properties/lines",
        "#/properties/nested",
        "#/properties/nested/properties/deep",
    ]
    assert types["#/properties/lines"].properties["sku"].type == "string"


def test_load_schema_node_reads_json_text(tmp_path: Path) -> None:
    schema_path = tmp_path / "schema.json"
    schema_path.write_text(json.dumps({"title": "Thing", "type": "object"}), encoding="utf-8")

    document = load_schema_document(
        _schema_config(schema_path.read_text(encoding="utf-8"), schema_path)
    )
    node = load_schema_node(_schema_config(schema_path.read_text(encoding="utf-8")))

    assert document.source == str(schema_path)
    assert node.title == "Thing"


def test_invalid_schema_text_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="Invalid JSON schema"):
        load_schema_document(_schema_config("{not-valid-json}"))


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_numbers_raise_schema_error(constant: str) -> None:
    text = f'{{"type": "number", "maximum": {constant}}}'

    with pytest.raises(SchemaError, match=f"non-finite number {constant}"):
        load_schema_document(_schema_config(text))


def test_non_object_root_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="root must be an object"):
        load_schema_document(_schema_config("[1, 2]"))


def test_non_object_property_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="#/properties/name"):
        parse_schema_node({"type": "object", "properties": {"name": "string"}})


def test_non_string_reference_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match=r"\$ref"):
        parse_schema_node({"$ref": 3})
