"""Record type extraction over a flattened schema."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from typextract.schema_management.schema_models import SchemaNode

from .extraction_errors import ErrorAggregator
from .field_resolver import resolve_fields
from .name_derivation import type_name_from_pointer
from .type_models import ExtractionResult, RecordType, SliceInfo

logger = logging.getLogger(__name__)


def extract_record_types(types: Mapping[str, SchemaNode]) -> ExtractionResult:
    """Build one record type per flattened schema node, keyed by derived name.

    Pointer paths are processed in sorted order. Failures are collected and
    returned as one combined error on the result; every other type is still
    produced.
    """
    records: dict[str, RecordType] = {}
    slices: list[SliceInfo] = []
    errors = ErrorAggregator()

    for pointer in sorted(types):
        node = types[pointer]
        resolved = resolve_fields(pointer, node.properties, types, node.required)
        slices.extend(resolved.slices)
        errors.extend(resolved.errors)

        name = type_name_from_pointer(pointer, node)
        if name in records:
            logger.warning(
                "Type %s derived from %s replaces the one derived from %s",
                name,
                pointer,
                records[name].id,
            )
        records[name] = RecordType(id=pointer, name=name, fields=resolved.fields)

    logger.debug(
        "Extracted %d record types and %d slices from %d schema nodes (%d errors)",
        len(records),
        len(slices),
        len(types),
        len(errors),
    )
    return ExtractionResult(types=records, slices=tuple(slices), error=errors.to_error())
