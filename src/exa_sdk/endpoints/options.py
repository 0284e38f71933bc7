from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from exa_sdk.wire import dump


@dataclass(frozen=True, slots=True)
class TextOptions:
    max_characters: int | None = None
    include_html_tags: bool | None = None

    def to_wire(self) -> dict[str, Any]:
        return dump(self)


@dataclass(frozen=True, slots=True)
class HighlightsOptions:
    num_sentences: int | None = None
    highlights_per_url: int | None = None
    # In search, defaults to the search query server-side.
    query: str | None = None

    def to_wire(self) -> dict[str, Any]:
        return dump(self)


@dataclass(frozen=True, slots=True)
class SummaryOptions:
    query: str | None = None

    def to_wire(self) -> dict[str, Any]:
        return dump(self)


@dataclass(frozen=True, slots=True)
class ContentOptions:
    """Content-shaping options nested under ``contents`` in search and find-similar.

    ``text=True`` asks for full text with the service defaults.
    """

    text: TextOptions | bool | None = None
    highlights: HighlightsOptions | None = None
    summary: SummaryOptions | None = None

    def to_wire(self) -> dict[str, Any]:
        return dump(self)
