__version__ = "0.1.0"

from exa_sdk.client import Exa  # noqa: E402
from exa_sdk.config import API_KEY_ENV, API_KEY_HEADER, DEFAULT_BASE_URL, ClientConfig  # noqa: E402
from exa_sdk.endpoints import (  # noqa: E402
    ContentOptions,
    ContentsRequest,
    ContentsResponse,
    ContentsResult,
    FindSimilarRequest,
    FindSimilarResponse,
    HighlightsOptions,
    SearchKind,
    SearchRequest,
    SearchResponse,
    SearchResult,
    SummaryOptions,
    TextOptions,
)
from exa_sdk.errors import (  # noqa: E402
    DecodeError,
    ExaError,
    HttpError,
    HttpErrorPayload,
    InvalidInputError,
    MissingCredentialError,
    TransportError,
)

__all__ = [
    "API_KEY_ENV",
    "API_KEY_HEADER",
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "ContentOptions",
    "ContentsRequest",
    "ContentsResponse",
    "ContentsResult",
    "DecodeError",
    "Exa",
    "ExaError",
    "FindSimilarRequest",
    "FindSimilarResponse",
    "HighlightsOptions",
    "HttpError",
    "HttpErrorPayload",
    "InvalidInputError",
    "MissingCredentialError",
    "SearchKind",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    "SummaryOptions",
    "TextOptions",
    "TransportError",
    "__version__",
]
