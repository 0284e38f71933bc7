from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from exa_sdk.endpoints.options import ContentOptions
from exa_sdk.errors import ExitCode, InvalidInputError
from exa_sdk.wire import (
    dump,
    expect_object,
    optional_float_list,
    optional_str,
    optional_str_list,
    require_float,
    require_list,
    require_str,
)

SEARCH_PATH = "/search"


class SearchKind(StrEnum):
    NEURAL = "neural"
    KEYWORD = "keyword"
    AUTO = "auto"


@dataclass(frozen=True, slots=True)
class SearchRequest:
    query: str
    use_autoprompt: bool | None = None
    kind: SearchKind | None = field(default=None, metadata={"wire": "type"})
    num_results: int | None = None
    include_domains: list[str] | None = None
    exclude_domains: list[str] | None = None
    start_crawl_date: str | None = None
    end_crawl_date: str | None = None
    start_published_date: str | None = None
    end_published_date: str | None = None
    include_text: list[str] | None = None
    exclude_text: list[str] | None = None
    contents: ContentOptions | None = None

    def __post_init__(self) -> None:
        if self.kind is None or isinstance(self.kind, SearchKind):
            return
        try:
            kind = SearchKind(str(self.kind).lower())
        except ValueError:
            raise InvalidInputError(
                code="invalid_input",
                message=f"unknown search type: {self.kind!r} (expected neural, keyword or auto)",
                exit_code=ExitCode.INVALID_USAGE,
                details={"field": "kind"},
            ) from None
        object.__setattr__(self, "kind", kind)

    def to_wire(self) -> dict[str, Any]:
        return dump(self)


@dataclass(frozen=True, slots=True)
class SearchResult:
    id: str
    title: str
    url: str
    score: float
    published_date: str | None = None
    author: str | None = None
    text: str | None = None
    highlights: tuple[str, ...] | None = None
    highlight_scores: tuple[float, ...] | None = None
    summary: str | None = None

    @classmethod
    def from_wire(cls, value: Any, *, where: str = "result") -> SearchResult:
        data = expect_object(value, where=where)
        return cls(
            id=require_str(data, "id", where=where),
            title=require_str(data, "title", where=where),
            url=require_str(data, "url", where=where),
            score=require_float(data, "score", where=where),
            published_date=optional_str(data, "published_date", where=where),
            author=optional_str(data, "author", where=where),
            text=optional_str(data, "text", where=where),
            highlights=optional_str_list(data, "highlights", where=where),
            highlight_scores=optional_float_list(data, "highlight_scores", where=where),
            summary=optional_str(data, "summary", where=where),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "score": self.score,
            "published_date": self.published_date,
            "author": self.author,
            "text": self.text,
            "highlights": None if self.highlights is None else list(self.highlights),
            "highlight_scores": (
                None if self.highlight_scores is None else list(self.highlight_scores)
            ),
            "summary": self.summary,
        }


def decode_results(data: dict[str, Any]) -> list[SearchResult]:
    return [
        SearchResult.from_wire(item, where=f"results[{idx}]")
        for idx, item in enumerate(require_list(data, "results"))
    ]


@dataclass(frozen=True, slots=True)
class SearchResponse:
    results: list[SearchResult]
    # Query rewritten by autoprompt, when it was requested.
    autoprompt_string: str | None = None
    # Date filter inferred from the query by autoprompt, if any.
    auto_date: str | None = None

    @classmethod
    def from_wire(cls, value: Any) -> SearchResponse:
        data = expect_object(value, where="response")
        return cls(
            results=decode_results(data),
            autoprompt_string=optional_str(data, "autoprompt_string"),
            auto_date=optional_str(data, "auto_date"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "autoprompt_string": self.autoprompt_string,
            "auto_date": self.auto_date,
        }
