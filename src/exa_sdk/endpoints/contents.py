from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from exa_sdk.endpoints.options import HighlightsOptions, SummaryOptions, TextOptions
from exa_sdk.errors import ExitCode, InvalidInputError
from exa_sdk.wire import (
    dump,
    expect_object,
    optional_float_list,
    optional_str,
    optional_str_list,
    require_list,
    require_str,
)

CONTENTS_PATH = "/contents"


@dataclass(frozen=True, slots=True)
class ContentsRequest:
    ids: list[str]
    text: TextOptions | None = None
    highlights: HighlightsOptions | None = None
    summary: SummaryOptions | None = None

    def __post_init__(self) -> None:
        if isinstance(self.ids, str):
            raise InvalidInputError(
                code="invalid_input",
                message="ids must be a list of result ids, not a string",
                exit_code=ExitCode.INVALID_USAGE,
                details={"field": "ids"},
            )

    def to_wire(self) -> dict[str, Any]:
        return dump(self)


@dataclass(frozen=True, slots=True)
class ContentsResult:
    id: str
    url: str
    title: str
    text: str | None = None
    highlights: tuple[str, ...] | None = None
    highlight_scores: tuple[float, ...] | None = None
    summary: str | None = None

    @classmethod
    def from_wire(cls, value: Any, *, where: str = "result") -> ContentsResult:
        data = expect_object(value, where=where)
        return cls(
            id=require_str(data, "id", where=where),
            url=require_str(data, "url", where=where),
            title=require_str(data, "title", where=where),
            text=optional_str(data, "text", where=where),
            highlights=optional_str_list(data, "highlights", where=where),
            highlight_scores=optional_float_list(data, "highlight_scores", where=where),
            summary=optional_str(data, "summary", where=where),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "title": self.title,
            "text": self.text,
            "highlights": None if self.highlights is None else list(self.highlights),
            "highlight_scores": (
                None if self.highlight_scores is None else list(self.highlight_scores)
            ),
            "summary": self.summary,
        }


@dataclass(frozen=True, slots=True)
class ContentsResponse:
    results: list[ContentsResult]

    @classmethod
    def from_wire(cls, value: Any) -> ContentsResponse:
        data = expect_object(value, where="response")
        return cls(
            results=[
                ContentsResult.from_wire(item, where=f"results[{idx}]")
                for idx, item in enumerate(require_list(data, "results"))
            ]
        )

    def to_dict(self) -> dict[str, Any]:
        return {"results": [r.to_dict() for r in self.results]}
