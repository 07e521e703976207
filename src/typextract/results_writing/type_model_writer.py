"""Type model serialization service."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from typextract.type_extraction.type_models import (
    Constraint,
    ExtractionResult,
    FieldSpec,
    NumberInfo,
    SliceInfo,
    StringInfo,
)

_CONSTRAINT_KEYS: dict[type, str] = {
    SliceInfo: "slice",
    StringInfo: "string",
    NumberInfo: "number",
}


def type_model_to_dict(result: ExtractionResult) -> dict[str, Any]:
    """Convert an extraction result into plain, deterministically ordered data."""
    types = {
        name: {
            "id": record.id,
            "name": record.name,
            "fields": {
                field_name: _field_to_dict(record.fields[field_name])
                for field_name in sorted(record.fields)
            },
        }
        for name, record in sorted(result.types.items())
    }
    return {
        "types": types,
        "slices": [asdict(slice_info) for slice_info in result.slices],
        "errors": list(result.error.errors) if result.error else [],
    }


def render_type_model(result: ExtractionResult, output_format: str = "json") -> str:
    """Render the type model as JSON or YAML text."""
    payload = type_model_to_dict(result)
    if output_format == "json":
        return json.dumps(payload, indent=2) + "\n"
    if output_format == "yaml":
        return yaml.safe_dump(payload, sort_keys=False)
    raise ValueError(f"Unsupported output format: {output_format}")


def write_type_model(
    result: ExtractionResult, output_path: Path | str, output_format: str = "json"
) -> Path:
    """Write the rendered type model and return the resolved destination."""
    destination = Path(output_path)
    destination.write_text(render_type_model(result, output_format), encoding="utf-8")
    return destination.resolve()


def _field_to_dict(spec: FieldSpec) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": spec.name,
        "json_name": spec.json_name,
        "type": spec.type,
        "required": spec.required,
    }
    payload.update(_constraint_to_dict(spec.constraint))
    return payload


def _constraint_to_dict(constraint: Constraint) -> dict[str, Any]:
    if constraint is None:
        return {}
    return {_CONSTRAINT_KEYS[type(constraint)]: asdict(constraint)}
