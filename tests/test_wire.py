from __future__ import annotations

import pytest

from exa_sdk.endpoints.contents import ContentsRequest
from exa_sdk.endpoints.find_similar import FindSimilarRequest
from exa_sdk.endpoints.options import ContentOptions, SummaryOptions, TextOptions
from exa_sdk.endpoints.search import SearchRequest, SearchResponse
from exa_sdk.errors import DecodeError
from exa_sdk.wire import to_camel


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("query", "query"),
        ("num_results", "numResults"),
        ("start_published_date", "startPublishedDate"),
        ("include_html_tags", "includeHtmlTags"),
    ],
)
def test_to_camel(name: str, expected: str) -> None:
    assert to_camel(name) == expected


def test_required_only_requests_omit_optional_fields() -> None:
    assert SearchRequest(query="q").to_wire() == {"query": "q"}
    assert FindSimilarRequest(url="https://example.com").to_wire() == {
        "url": "https://example.com"
    }
    assert ContentsRequest(ids=["a"]).to_wire() == {"ids": ["a"]}


def test_set_falsy_values_are_sent() -> None:
    request = SearchRequest(
        query="",
        use_autoprompt=False,
        num_results=0,
        include_domains=[],
        contents=ContentOptions(text=TextOptions(include_html_tags=False)),
    )
    assert request.to_wire() == {
        "query": "",
        "useAutoprompt": False,
        "numResults": 0,
        "includeDomains": [],
        "contents": {"text": {"includeHtmlTags": False}},
    }


def test_content_text_flag_and_empty_summary() -> None:
    options = ContentOptions(text=True, summary=SummaryOptions())
    assert options.to_wire() == {"text": True, "summary": {}}


def test_search_response_decodes_camel_case() -> None:
    response = SearchResponse.from_wire(
        {
            "results": [
                {
                    "id": "a",
                    "title": "A",
                    "url": "https://example.com",
                    "score": 1,
                    "publishedDate": "2024-02-03",
                    "highlightScores": [1, 0.25],
                    "highlights": ["x", "y"],
                }
            ],
            "autopromptString": "expanded",
        }
    )
    result = response.results[0]
    assert result.score == 1.0
    assert isinstance(result.score, float)
    assert result.published_date == "2024-02-03"
    assert result.highlight_scores == (1.0, 0.25)
    assert response.autoprompt_string == "expanded"


@pytest.mark.parametrize(
    "body",
    [
        [],
        {},
        {"results": None},
        {"results": [None]},
        {"results": [{"id": "a", "title": "A", "url": "u", "score": True}]},
        {"results": [{"id": "a", "title": None, "url": "u", "score": 0.1}]},
        {"results": [{"id": "a", "title": "A", "url": "u", "score": 0.1, "highlights": "x"}]},
        {"results": [{"id": "a", "title": "A", "url": "u", "score": 0.1, "highlightScores": [""]}]},
        {"results": [], "autopromptString": 3},
    ],
)
def test_search_response_rejects_malformed(body: object) -> None:
    with pytest.raises(DecodeError):
        SearchResponse.from_wire(body)


def test_oversized_integer_score_is_decode_error() -> None:
    body = {"results": [{"id": "a", "title": "A", "url": "u", "score": 10**400}]}
    with pytest.raises(DecodeError) as exc:
        SearchResponse.from_wire(body)
    assert exc.value.details == {"field": "results[0].score"}
