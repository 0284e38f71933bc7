from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any, Protocol, Self, TypeVar

import httpx

from exa_sdk import __version__
from exa_sdk.config import DEFAULT_TIMEOUT, ClientConfig
from exa_sdk.endpoints.contents import CONTENTS_PATH, ContentsRequest, ContentsResponse
from exa_sdk.endpoints.find_similar import (
    FIND_SIMILAR_PATH,
    FindSimilarRequest,
    FindSimilarResponse,
)
from exa_sdk.endpoints.search import SEARCH_PATH, SearchRequest, SearchResponse
from exa_sdk.errors import (
    DecodeError,
    ExitCode,
    HttpError,
    HttpErrorPayload,
    InvalidInputError,
    TransportError,
)
from exa_sdk.urlutil import redact_url
from exa_sdk.wire import expect_object, require_str

logger = logging.getLogger(__name__)


class WireRequest(Protocol):
    def to_wire(self) -> dict[str, Any]: ...


class WireResponse(Protocol):
    @classmethod
    def from_wire(cls, value: Any) -> Self: ...


ResponseT = TypeVar("ResponseT", bound=WireResponse)


class Exa:
    """Async client for the Exa search API.

    Construct once and reuse; the configuration is fixed at construction and the
    instance holds no per-call state, so calls may run concurrently.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        proxy: str | None = None,
        environ: Mapping[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = ClientConfig.resolve(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            proxy=proxy,
            environ=environ,
        )
        self._owns_http = http_client is None
        if http_client is None:
            client_args: dict[str, Any] = {"timeout": httpx.Timeout(self._config.timeout)}
            if self._config.proxy:
                client_args["proxy"] = self._config.proxy
            http_client = httpx.AsyncClient(**client_args)
        self._http = http_client

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __repr__(self) -> str:
        return f"Exa(base_url={self._config.base_url!r})"

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def search(self, request: SearchRequest) -> SearchResponse:
        return await self.send(SEARCH_PATH, request, SearchResponse)

    async def find_similar(self, request: FindSimilarRequest) -> FindSimilarResponse:
        return await self.send(FIND_SIMILAR_PATH, request, FindSimilarResponse)

    async def get_contents(self, request: ContentsRequest) -> ContentsResponse:
        return await self.send(CONTENTS_PATH, request, ContentsResponse)

    async def send(
        self, path: str, request: WireRequest, response_type: type[ResponseT]
    ) -> ResponseT:
        """POST ``request`` to ``path`` and decode the reply as ``response_type``.

        Raises InvalidInputError, TransportError, HttpError or DecodeError; never retries.
        """
        url = f"{self._config.base_url}{path}"
        body = request.to_wire()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("POST %s", redact_url(url))

        try:
            resp = await self._http.post(url, headers=self._build_headers(), json=body)
        except httpx.InvalidURL as exc:
            raise InvalidInputError(
                code="invalid_input",
                message=f"cannot build a request URL for {path!r}",
                exit_code=ExitCode.INVALID_USAGE,
                details={"path": path},
            ) from exc
        except httpx.TimeoutException as exc:
            raise TransportError(
                code="timeout",
                message=f"request to {path} timed out",
                details={"path": path},
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                code="transport_error",
                message=f"request to {path} failed: {exc.__class__.__name__}",
                details={"path": path},
            ) from exc

        logger.debug("%s returned HTTP %d", path, resp.status_code)
        return handle_response(resp, path=path, response_type=response_type)

    def _build_headers(self) -> dict[str, str]:
        return {
            "accept": "application/json",
            "user-agent": f"exa-sdk-python/{__version__}",
            **self._config.auth_headers(),
        }


def handle_response(
    resp: httpx.Response, *, path: str, response_type: type[ResponseT]
) -> ResponseT:
    status = resp.status_code
    if not resp.is_success:
        payload = _decode_error_payload(resp, path=path)
        raise HttpError(
            code=payload.code,
            message=payload.message,
            details={"path": path},
            status=status,
        )

    try:
        return response_type.from_wire(_parse_json(resp, path=path))
    except DecodeError as exc:
        raise DecodeError(
            code=exc.code,
            message=exc.message,
            details={**(exc.details or {}), "path": path, "status": status},
        ) from exc


def _parse_json(resp: httpx.Response, *, path: str) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise DecodeError(
            code="decode_error",
            message=f"{path} returned a non-JSON body (HTTP {resp.status_code})",
            details={"path": path, "status": resp.status_code},
        ) from exc


def _decode_error_payload(resp: httpx.Response, *, path: str) -> HttpErrorPayload:
    status = resp.status_code
    try:
        data = expect_object(_parse_json(resp, path=path), where="error")
        return HttpErrorPayload(
            code=require_str(data, "code", where="error"),
            message=require_str(data, "message", where="error"),
        )
    except DecodeError as exc:
        raise DecodeError(
            code="decode_error",
            message=f"{path} returned HTTP {status} with an unrecognized error body",
            details={**(exc.details or {}), "path": path, "status": status},
        ) from exc
