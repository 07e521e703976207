"""Schema primitive kind to target type name mapping."""

from __future__ import annotations

ARRAY_ERROR_TYPE = "error_creating_array"
UNDEFINED_TYPE = "undefined"

POINTER_PREFIX = "*"
SLICE_PREFIX = "[]"

INTEGER_TYPE = "int"
NUMBER_TYPE = "float64"
STRING_TYPE = "string"

NUMERIC_TYPES = frozenset({INTEGER_TYPE, NUMBER_TYPE})

_PRIMITIVES = {
    "boolean": "bool",
    "integer": INTEGER_TYPE,
    "number": NUMBER_TYPE,
    "null": "nil",
    "string": STRING_TYPE,
}


def map_primitive_type(kind: str, subtype: str, pointer: bool) -> tuple[str, str | None]:
    """Return the target type name for a schema kind and an error message on failure.

    Args:
      kind: JSON schema primitive kind, e.g. ``object`` or ``integer``.
      subtype: Resolved record or element type name for objects and arrays.
      pointer: Whether object types are held by reference.

    Returns:
      A ``(type_name, error)`` pair. On failure ``type_name`` is a sentinel so that
      callers can keep going.
    """
    if kind == "array":
        if not subtype:
            return ARRAY_ERROR_TYPE, "can't create an array of an empty subtype"
        return SLICE_PREFIX + subtype, None
    if kind == "object":
        if not subtype:
            return UNDEFINED_TYPE, "can't reference an object without a resolved type name"
        return (POINTER_PREFIX + subtype if pointer else subtype), None
    if kind in _PRIMITIVES:
        return _PRIMITIVES[kind], None
    return (
        UNDEFINED_TYPE,
        f"failed to get a primitive type for schemaType {kind} and subtype {subtype}",
    )
