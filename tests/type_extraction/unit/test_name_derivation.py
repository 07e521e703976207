"""Name derivation tests."""

from __future__ import annotations

import pytest
from typextract.schema_management.schema_models import SchemaNode
from typextract.type_extraction.name_derivation import identifier_from, type_name_from_pointer


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("id", "Id"),
        ("first_name", "FirstName"),
        ("address-line.1 x", "AddressLine1X"),
        ("alreadyCamel", "AlreadyCamel"),
        ("__private", "Private"),
        ("", ""),
    ],
)
def test_identifier_from_splits_and_capitalizes(raw: str, expected: str) -> None:
    assert identifier_from(raw) == expected


def test_root_pointer_prefers_title_then_description() -> None:
    assert type_name_from_pointer("#", SchemaNode(title="my product", description="x")) == (
        "MyProduct"
    )
    assert type_name_from_pointer("#", SchemaNode(description="order-line")) == "OrderLine"
    assert type_name_from_pointer("#", SchemaNode()) == "Root"


def test_pointer_uses_last_segments() -> None:
    node = SchemaNode(type="object", title="Ignored")

    assert type_name_from_pointer("#/definitions/postal_address", node) == "PostalAddress"
    assert type_name_from_pointer("#/properties/nested", node) == "Nested"
    assert (
        type_name_from_pointer("#/definitions/postal_address", node, depth=2)
        == "DefinitionsPostalAddress"
    )


def test_empty_pointer_segments_fall_back_to_root() -> None:
    assert type_name_from_pointer("#/", SchemaNode()) == "Root"


def test_derivation_is_deterministic_but_may_collide() -> None:
    node = SchemaNode(type="object")

    first = type_name_from_pointer("#/definitions/item", node)
    second = type_name_from_pointer("#/properties/item", node)

    assert first == type_name_from_pointer("#/definitions/item", node)
    assert first == second == "Item"
