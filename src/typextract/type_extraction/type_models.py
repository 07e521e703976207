"""Type model entities produced by extraction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from .extraction_errors import TypeExtractionError


@dataclass(frozen=True)
class SliceInfo:
    """Array element type and size constraints."""

    elem_type: str
    min_items: int = 0
    max_items: int = 0


@dataclass(frozen=True)
class StringInfo:
    """String length and pattern constraints."""

    min_length: int = 0
    max_length: int = 0
    pattern: str = ""


@dataclass(frozen=True)
class NumberInfo:
    """Numeric range constraints. Absent bounds are None."""

    multiple_of: float = 0
    minimum: float | None = None
    exclusive_minimum: bool = False
    maximum: float | None = None
    exclusive_maximum: bool = False


Constraint: TypeAlias = SliceInfo | StringInfo | NumberInfo | None


@dataclass(frozen=True)
class FieldSpec:
    """One field of a record type."""

    name: str
    json_name: str
    type: str
    required: bool = False
    constraint: Constraint = None

    @property
    def slice_info(self) -> SliceInfo | None:
        return self.constraint if isinstance(self.constraint, SliceInfo) else None

    @property
    def string_info(self) -> StringInfo | None:
        return self.constraint if isinstance(self.constraint, StringInfo) else None

    @property
    def number_info(self) -> NumberInfo | None:
        return self.constraint if isinstance(self.constraint, NumberInfo) else None


@dataclass(frozen=True)
class RecordType:
    """Named record derived from one object schema node."""

    id: str
    name: str
    fields: Mapping[str, FieldSpec] = field(default_factory=dict)


@dataclass(frozen=True)
class ExtractionResult:
    """Output of one extraction run, partial when error is set."""

    types: Mapping[str, RecordType]
    slices: tuple[SliceInfo, ...]
    error: TypeExtractionError | None = None

    @property
    def ok(self) -> bool:
        """Return True when every type and field resolved."""
        return self.error is None
