"""Length-based choice between two pattern converters."""

from __future__ import annotations

import logging

from textmask.converters.base import BaseConverter
from textmask.converters.pattern import PatternConverter
from textmask.core import count_in_class

logger = logging.getLogger(__name__)


class DispatchConverter(BaseConverter):
    """Formats with `long` once the input carries `threshold` digits, else `short`.

    Storage always normalizes against `long`, which must be the wider template.
    """

    def __init__(
        self,
        *,
        id: str,
        description: str,
        short: PatternConverter,
        long: PatternConverter,
        threshold: int,
        example: str | None = None,
    ) -> None:
        if long.max_length < short.max_length:
            raise ValueError(f"{id}: long template must not have fewer slots than short")
        self.id = id
        self.description = description
        self.short = short
        self.long = long
        self.threshold = threshold
        self.example = example
        self.max_length = long.max_length

    def choose(self, value: str | None) -> PatternConverter:
        digits = count_in_class(value, "numeric")
        chosen = self.long if digits >= self.threshold else self.short
        logger.debug("%s: %d digits -> %s", self.id, digits, chosen.id)
        return chosen

    def to_display(self, value: str | None) -> str | None:
        if not value:
            return None
        return self.choose(value).to_display(value)

    def to_storage(self, value: str | None) -> str | None:
        return self.long.to_storage(value)
