"""Converter base types."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseConverter(ABC):
    """Pairs a display transform with a storage transform for one kind of value."""

    id: str
    description: str
    example: str | None = None
    pattern: str | None = None
    max_length: int | None = None

    @abstractmethod
    def to_display(self, value: str | None) -> str | None:
        """Render a stored (or raw) value for display and editing."""

    @abstractmethod
    def to_storage(self, value: str | None) -> str | None:
        """Reduce a displayed (or raw) value to its persisted form."""
