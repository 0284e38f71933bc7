from exa_sdk.endpoints.contents import (
    CONTENTS_PATH,
    ContentsRequest,
    ContentsResponse,
    ContentsResult,
)
from exa_sdk.endpoints.find_similar import (
    FIND_SIMILAR_PATH,
    FindSimilarRequest,
    FindSimilarResponse,
)
from exa_sdk.endpoints.options import (
    ContentOptions,
    HighlightsOptions,
    SummaryOptions,
    TextOptions,
)
from exa_sdk.endpoints.search import (
    SEARCH_PATH,
    SearchKind,
    SearchRequest,
    SearchResponse,
    SearchResult,
)

__all__ = [
    "CONTENTS_PATH",
    "FIND_SIMILAR_PATH",
    "SEARCH_PATH",
    "ContentOptions",
    "ContentsRequest",
    "ContentsResponse",
    "ContentsResult",
    "FindSimilarRequest",
    "FindSimilarResponse",
    "HighlightsOptions",
    "SearchKind",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    "SummaryOptions",
    "TextOptions",
]
