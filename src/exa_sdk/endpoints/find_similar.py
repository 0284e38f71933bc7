from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from exa_sdk.endpoints.options import ContentOptions
from exa_sdk.endpoints.search import SearchResult, decode_results
from exa_sdk.errors import ExitCode, InvalidInputError
from exa_sdk.urlutil import is_http_url
from exa_sdk.wire import dump, expect_object

FIND_SIMILAR_PATH = "/findSimilar"


@dataclass(frozen=True, slots=True)
class FindSimilarRequest:
    url: str
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
        if not isinstance(self.url, str) or not is_http_url(self.url):
            raise InvalidInputError(
                code="invalid_input",
                message=f"url must be an absolute http(s) URL: {self.url!r}",
                exit_code=ExitCode.INVALID_USAGE,
                details={"field": "url"},
            )

    def to_wire(self) -> dict[str, Any]:
        return dump(self)


@dataclass(frozen=True, slots=True)
class FindSimilarResponse:
    results: list[SearchResult]

    @classmethod
    def from_wire(cls, value: Any) -> FindSimilarResponse:
        return cls(results=decode_results(expect_object(value, where="response")))

    def to_dict(self) -> dict[str, Any]:
        return {"results": [r.to_dict() for r in self.results]}
