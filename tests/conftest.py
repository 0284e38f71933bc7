from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import pytest

from exa_sdk.client import Exa

BASE_URL = "https://exa.test"
API_KEY = "test_key"


@pytest.fixture
def call_exa() -> Callable[[Callable[[Exa], Awaitable[Any]]], Any]:
    def _call(operation: Callable[[Exa], Awaitable[Any]]) -> Any:
        async def go() -> Any:
            async with Exa(api_key=API_KEY, base_url=BASE_URL, environ={}) as exa:
                return await operation(exa)

        return asyncio.run(go())

    return _call
