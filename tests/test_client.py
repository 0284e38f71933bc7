from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
import respx
from httpx import Response

from exa_sdk import __version__
from exa_sdk.client import Exa
from exa_sdk.endpoints.contents import ContentsRequest
from exa_sdk.endpoints.find_similar import FindSimilarRequest
from exa_sdk.endpoints.search import SearchRequest, SearchResponse
from exa_sdk.errors import DecodeError, HttpError, InvalidInputError, TransportError

SEARCH_URL = "https://exa.test/search"
RESULT = {"id": "a", "title": "A", "url": "https://example.com/a", "score": 0.5}


def test_api_key_header_is_raw_key_on_every_endpoint(call_exa) -> None:
    with respx.mock:
        routes = [
            respx.post("https://exa.test/search").mock(
                return_value=Response(200, json={"results": []})
            ),
            respx.post("https://exa.test/findSimilar").mock(
                return_value=Response(200, json={"results": []})
            ),
            respx.post("https://exa.test/contents").mock(
                return_value=Response(200, json={"results": []})
            ),
        ]

        async def all_three(exa: Exa) -> None:
            await exa.search(SearchRequest(query="q"))
            await exa.find_similar(FindSimilarRequest(url="https://example.com"))
            await exa.get_contents(ContentsRequest(ids=["a"]))

        call_exa(all_three)

    for route in routes:
        request = route.calls.last.request
        assert request.method == "POST"
        assert request.headers["x-api-key"] == "test_key"
        assert "authorization" not in request.headers
        assert request.headers["user-agent"] == f"exa-sdk-python/{__version__}"
        assert request.headers["content-type"] == "application/json"


def test_connect_error_is_transport_error(call_exa) -> None:
    with respx.mock:
        respx.post(SEARCH_URL).mock(side_effect=httpx.ConnectError("connection refused"))
        with pytest.raises(TransportError) as exc:
            call_exa(lambda exa: exa.search(SearchRequest(query="q")))

    assert exc.value.code == "transport_error"
    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_timeout_is_transport_error(call_exa) -> None:
    with respx.mock:
        respx.post(SEARCH_URL).mock(side_effect=httpx.ReadTimeout("too slow"))
        with pytest.raises(TransportError) as exc:
            call_exa(lambda exa: exa.search(SearchRequest(query="q")))

    assert exc.value.code == "timeout"


def test_transport_failure_is_not_retried(call_exa) -> None:
    with respx.mock:
        route = respx.post(SEARCH_URL).mock(side_effect=httpx.ConnectError("down"))
        with pytest.raises(TransportError):
            call_exa(lambda exa: exa.search(SearchRequest(query="q")))

    assert route.call_count == 1


def test_success_body_missing_field_is_decode_error(call_exa) -> None:
    bad = {"results": [{"id": "a", "title": "A", "url": "https://example.com/a"}]}
    with respx.mock:
        respx.post(SEARCH_URL).mock(return_value=Response(200, json=bad))
        with pytest.raises(DecodeError) as exc:
            call_exa(lambda exa: exa.search(SearchRequest(query="q")))

    assert exc.value.details is not None
    assert exc.value.details["field"] == "results[0].score"
    assert exc.value.details["status"] == 200
    assert exc.value.details["path"] == "/search"


def test_success_body_wrong_type_is_decode_error(call_exa) -> None:
    bad = {"results": [{**RESULT, "score": "high"}]}
    with respx.mock:
        respx.post(SEARCH_URL).mock(return_value=Response(200, json=bad))
        with pytest.raises(DecodeError):
            call_exa(lambda exa: exa.search(SearchRequest(query="q")))


def test_success_body_not_json_is_decode_error(call_exa) -> None:
    with respx.mock:
        respx.post(SEARCH_URL).mock(return_value=Response(200, text="<html>oops</html>"))
        with pytest.raises(DecodeError):
            call_exa(lambda exa: exa.search(SearchRequest(query="q")))


def test_unparseable_error_body_is_decode_error(call_exa) -> None:
    with respx.mock:
        respx.post(SEARCH_URL).mock(return_value=Response(500, text="Internal Server Error"))
        with pytest.raises(DecodeError) as exc:
            call_exa(lambda exa: exa.search(SearchRequest(query="q")))

    assert not isinstance(exc.value, HttpError)
    assert exc.value.details is not None
    assert exc.value.details["status"] == 500


def test_error_body_missing_message_is_decode_error(call_exa) -> None:
    with respx.mock:
        respx.post(SEARCH_URL).mock(return_value=Response(403, json={"code": "forbidden"}))
        with pytest.raises(DecodeError) as exc:
            call_exa(lambda exa: exa.search(SearchRequest(query="q")))

    assert exc.value.details is not None
    assert exc.value.details["field"] == "error.message"


def test_any_2xx_is_success(call_exa) -> None:
    with respx.mock:
        respx.post(SEARCH_URL).mock(return_value=Response(203, json={"results": [RESULT]}))
        response = call_exa(lambda exa: exa.search(SearchRequest(query="q")))

    assert [r.id for r in response.results] == ["a"]


def test_base_url_trailing_slash_is_stripped() -> None:
    async def go() -> list[str]:
        async with Exa(api_key="k", base_url="https://exa.test/", environ={}) as exa:
            response = await exa.search(SearchRequest(query="q"))
            return [r.id for r in response.results]

    with respx.mock:
        route = respx.post(SEARCH_URL).mock(
            return_value=Response(200, json={"results": [RESULT]})
        )
        assert asyncio.run(go()) == ["a"]

    assert route.called


def test_injected_http_client_is_left_open() -> None:
    async def go() -> bool:
        http = httpx.AsyncClient()
        async with Exa(api_key="k", base_url="https://exa.test", environ={}, http_client=http):
            pass
        closed = http.is_closed
        await http.aclose()
        return closed

    assert asyncio.run(go()) is False


def test_concurrent_calls_share_one_client(call_exa) -> None:
    with respx.mock:
        route = respx.post(SEARCH_URL).mock(
            return_value=Response(200, json={"results": [RESULT]})
        )

        async def many(exa: Exa) -> list[int]:
            responses = await asyncio.gather(
                *(exa.search(SearchRequest(query=f"q{i}")) for i in range(5))
            )
            return [len(r.results) for r in responses]

        assert call_exa(many) == [1] * 5

    assert route.call_count == 5


def test_debug_logging_never_contains_key(call_exa, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="exa_sdk.client")
    with respx.mock:
        respx.post(SEARCH_URL).mock(
            return_value=Response(401, json={"code": "unauthorized", "message": "nope"})
        )
        with pytest.raises(HttpError) as exc:
            call_exa(lambda exa: exa.search(SearchRequest(query="q")))

    assert "POST https://exa.test/search" in caplog.text
    assert "test_key" not in caplog.text
    assert "test_key" not in str(exc.value)


def test_repr_hides_key() -> None:
    exa = Exa(api_key="super-secret", base_url="https://exa.test", environ={})
    assert "super-secret" not in repr(exa)
    assert "super-secret" not in repr(exa.config)


def test_unbuildable_request_url_is_invalid_input(call_exa) -> None:
    async def bad_path(exa: Exa) -> SearchResponse:
        return await exa.send("/search\x07", SearchRequest(query="q"), SearchResponse)

    with pytest.raises(InvalidInputError) as exc:
        call_exa(bad_path)

    assert exc.value.code == "invalid_input"
    assert isinstance(exc.value.__cause__, httpx.InvalidURL)


def test_http_error_survives_contextmanager(call_exa) -> None:
    @contextlib.contextmanager
    def scope() -> Iterator[None]:
        yield

    with respx.mock:
        respx.post(SEARCH_URL).mock(
            return_value=Response(
                400, json={"code": "bad_request", "message": "Invalid request parameters"}
            )
        )
        with pytest.raises(HttpError) as exc:
            with scope():
                call_exa(lambda exa: exa.search(SearchRequest(query="q")))

    assert exc.value.status == 400


def test_invalid_input_survives_asynccontextmanager() -> None:
    @contextlib.asynccontextmanager
    async def scope() -> AsyncIterator[None]:
        yield

    async def go() -> None:
        async with scope():
            FindSimilarRequest(url="not a valid url")

    with pytest.raises(InvalidInputError) as exc:
        asyncio.run(go())

    assert exc.value.details == {"field": "url"}
