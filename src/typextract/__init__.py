"""JSON Schema to record type model extraction."""

from .type_extraction import ExtractionResult, extract_record_types

__all__ = ["ExtractionResult", "extract_record_types"]
