"""Type extraction exports."""

from .extraction_errors import ErrorAggregator, TypeExtractionError
from .field_resolver import resolve_fields, resolve_type
from .name_derivation import identifier_from, type_name_from_pointer
from .primitive_types import map_primitive_type
from .type_extractor import extract_record_types
from .type_models import (
    ExtractionResult,
    FieldSpec,
    NumberInfo,
    RecordType,
    SliceInfo,
    StringInfo,
)

__all__ = [
    "ErrorAggregator",
    "ExtractionResult",
    "FieldSpec",
    "NumberInfo",
    "RecordType",
    "SliceInfo",
    "StringInfo",
    "TypeExtractionError",
    "extract_record_types",
    "identifier_from",
    "map_primitive_type",
    "resolve_fields",
    "resolve_type",
    "type_name_from_pointer",
]
