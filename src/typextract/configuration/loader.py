"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import OUTPUT_FORMATS, Configuration, OutputSettings, SchemaConfig

_PLACEHOLDER_MARKERS = ("<REQUIRED>", "<OPTIONAL>")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    output = _parse_output_section(parsed.get("output"))
    return Configuration(path=path, schema=schema, output=output)


def load_schema_file(schema_path: Path | str) -> SchemaConfig:
    """Read a schema file directly, bypassing a configuration file."""
    path = Path(schema_path)
    if not path.exists():
        raise ConfigurationError(f"Schema file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        raise ConfigurationError("Schema text cannot be empty.")
    return SchemaConfig(text=text, source_path=path)


def _parse_schema_section(value: Any, base_path: Path) -> SchemaConfig:
    section = _require_mapping(value, "schema")
    inline = _optional_string(section.get("inline"), "schema.inline")
    path_value = _optional_string(section.get("path"), "schema.path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    if inline:
        if not inline.strip():
            raise ConfigurationError("Schema text cannot be empty.")
        return SchemaConfig(text=inline)
    if path_value:
        return load_schema_file(_resolve_path(base_path, path_value))
    raise ConfigurationError("Schema definition requires either inline or path.")


def _parse_output_section(value: Any) -> OutputSettings:
    if value is None:
        return OutputSettings()
    section = _require_mapping(value, "output")
    output_format = _optional_string(section.get("format"), "output.format") or "json"
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got '{output_format}'."
        )
    allow_partial = section.get("allow_partial", False)
    if not isinstance(allow_partial, bool):
        raise ConfigurationError("output.allow_partial must be a boolean.")
    return OutputSettings(format=output_format, allow_partial=allow_partial)


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{label} section must be a mapping.")
    return value


def _optional_string(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{label} must be a string.")
    if value.strip() in _PLACEHOLDER_MARKERS:
        raise ConfigurationError(f"{label} still contains a placeholder value.")
    return value


def _resolve_path(base_path: Path, value: str) -> Path:
    candidate = Path(value).expanduser()
    if not candidate.is_absolute():
        candidate = (base_path / candidate).resolve()
    return candidate
