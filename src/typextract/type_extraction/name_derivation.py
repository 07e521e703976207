"""Identifier derivation from pointer paths and property names."""

from __future__ import annotations

import re

from typextract.schema_management.schema_models import SchemaNode

ROOT_POINTER = "#"
FALLBACK_NAME = "Root"

_SEPARATORS = re.compile(r"[_ .\-]")


def identifier_from(text: str) -> str:
    """Split on ``_``, space, ``.`` and ``-`` and capitalize each segment."""
    return "".join(segment[:1].upper() + segment[1:] for segment in _SEPARATORS.split(text))


def type_name_from_pointer(pointer: str, node: SchemaNode, depth: int = 1) -> str:
    """Derive a record type name from the last ``depth`` segments of a pointer path.

    The root pointer uses the schema title, then its description, then ``Root``.
    """
    if pointer == ROOT_POINTER:
        return identifier_from(node.title or node.description or FALLBACK_NAME)

    segments = pointer.replace("#/", "").split("/")
    result = "".join(identifier_from(segment) for segment in segments[-depth:])
    return result or FALLBACK_NAME
