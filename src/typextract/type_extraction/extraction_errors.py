"""Error aggregation for best-effort extraction."""

from __future__ import annotations

from collections.abc import Iterable

ERROR_SEPARATOR = ", "


class TypeExtractionError(Exception):
    """Raised or returned when one or more types could not be resolved."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = tuple(errors)
        super().__init__(ERROR_SEPARATOR.join(self.errors))


class ErrorAggregator:
    """Collect failure messages in discovery order without stopping traversal."""

    def __init__(self) -> None:
        self._messages: list[str] = []

    def add(self, message: str) -> None:
        self._messages.append(message)

    def extend(self, messages: Iterable[str]) -> None:
        self._messages.extend(messages)

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def render(self) -> str:
        """Join all collected messages into one line."""
        return ERROR_SEPARATOR.join(self._messages)

    def to_error(self) -> TypeExtractionError | None:
        """Return the combined error, or None when nothing failed."""
        if not self._messages:
            return None
        return TypeExtractionError(self._messages)
