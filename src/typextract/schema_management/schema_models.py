"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed JSON schema text before node construction."""

    root: Any
    source: str | None = None


@dataclass(frozen=True)
class SchemaNode:  # pylint: disable=too-many-instance-attributes
    """One JSON schema definition with the keywords the extractor inspects."""

    type: str = ""
    properties: Mapping[str, SchemaNode] = field(default_factory=dict)
    items: SchemaNode | None = None
    reference: str = ""
    required: tuple[str, ...] = ()
    title: str = ""
    description: str = ""
    definitions: Mapping[str, SchemaNode] = field(default_factory=dict)
    defs: Mapping[str, SchemaNode] = field(default_factory=dict)
    min_length: int = 0
    max_length: int = 0
    pattern: str = ""
    multiple_of: float = 0
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False
    min_items: int = 0
    max_items: int = 0
