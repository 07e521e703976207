"""Per-property field type resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from typextract.schema_management.schema_models import SchemaNode

from .extraction_errors import ErrorAggregator
from .name_derivation import identifier_from, type_name_from_pointer
from .primitive_types import NUMERIC_TYPES, STRING_TYPE, map_primitive_type
from .type_models import Constraint, FieldSpec, NumberInfo, SliceInfo, StringInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedType:
    """Target type and constraint block for one schema node."""

    type: str
    constraint: Constraint = None
    error: str | None = None


@dataclass(frozen=True)
class ResolvedFields:
    """Fields of one record type plus the slices and failures found on the way."""

    fields: Mapping[str, FieldSpec]
    slices: tuple[SliceInfo, ...]
    errors: tuple[str, ...]


def resolve_type(
    parent_path: str,
    property_name: str,
    field_name: str,
    node: SchemaNode,
    types: Mapping[str, SchemaNode],
    *,
    pointer: bool = True,
) -> ResolvedType:
    """Resolve one property node to its target type name and constraint block.

    Lookup order is named reference, embedded object at
    ``<parent_path>/properties/<property_name>``, array, then primitive.
    """
    kind = node.type
    subtype = ""
    slice_bounds: tuple[int, int] | None = None

    if node.reference and node.reference in types:
        kind = "object"
        subtype = type_name_from_pointer(node.reference, types[node.reference])

    embedded_path = f"{parent_path}/properties/{property_name}"
    if not subtype and kind == "object" and embedded_path in types:
        subtype = type_name_from_pointer(embedded_path, types[embedded_path])

    if kind == "array":
        if node.items is not None:
            element = resolve_type(
                parent_path, property_name, field_name, node.items, types, pointer=False
            )
            if element.error is None:
                subtype = element.type
        slice_bounds = (node.min_items, node.max_items)

    type_name, failure = map_primitive_type(kind, subtype, pointer)
    if failure is not None:
        return ResolvedType(
            type=type_name,
            error=f"Failed to get the type for {field_name} with error {failure}",
        )

    constraint: Constraint = None
    if slice_bounds is not None:
        constraint = SliceInfo(subtype, *slice_bounds)
    elif type_name in NUMERIC_TYPES:
        constraint = _number_info(node)
    elif type_name == STRING_TYPE:
        constraint = _string_info(node)
    return ResolvedType(type=type_name, constraint=constraint)


def resolve_fields(
    parent_path: str,
    properties: Mapping[str, SchemaNode],
    types: Mapping[str, SchemaNode],
    required: Sequence[str],
) -> ResolvedFields:
    """Resolve every property of a record type in sorted property-name order."""
    fields: dict[str, FieldSpec] = {}
    slices: list[SliceInfo] = []
    missing: list[str] = []
    errors = ErrorAggregator()
    required_names = frozenset(required)

    for property_name in sorted(properties):
        field_name = identifier_from(property_name)
        resolved = resolve_type(
            parent_path, property_name, field_name, properties[property_name], types
        )
        if resolved.error is not None:
            missing.append(field_name)
            errors.add(resolved.error)

        spec = FieldSpec(
            name=field_name,
            json_name=property_name,
            type=resolved.type,
            required=property_name in required_names,
            constraint=resolved.constraint,
        )
        if field_name in fields:
            logger.warning(
                "Field %s of %s derived from %r replaces the one derived from %r",
                field_name,
                parent_path,
                property_name,
                fields[field_name].json_name,
            )
        fields[field_name] = spec
        if spec.slice_info is not None:
            slices.append(spec.slice_info)

    failures: tuple[str, ...] = ()
    if missing:
        failures = (f"missing types for {','.join(missing)} with errors {errors.render()}",)
    return ResolvedFields(fields=fields, slices=tuple(slices), errors=failures)


def _number_info(node: SchemaNode) -> NumberInfo | None:
    if (
        node.multiple_of == 0
        and node.minimum is None
        and not node.exclusive_minimum
        and node.maximum is None
        and not node.exclusive_maximum
    ):
        return None
    return NumberInfo(
        multiple_of=node.multiple_of,
        minimum=node.minimum,
        exclusive_minimum=node.exclusive_minimum,
        maximum=node.maximum,
        exclusive_maximum=node.exclusive_maximum,
    )


def _string_info(node: SchemaNode) -> StringInfo | None:
    if node.min_length == 0 and node.max_length == 0 and not node.pattern:
        return None
    return StringInfo(
        min_length=node.min_length, max_length=node.max_length, pattern=node.pattern
    )
