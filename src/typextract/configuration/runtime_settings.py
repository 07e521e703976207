"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

OUTPUT_FORMATS = ("json", "yaml")


@dataclass(frozen=True)
class SchemaConfig:
    """Normalized schema source."""

    text: str
    source_path: Path | None = None


@dataclass(frozen=True)
class OutputSettings:
    """How the extracted type model is rendered."""

    format: str = "json"
    allow_partial: bool = False


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaConfig
    output: OutputSettings
