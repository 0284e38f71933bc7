from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable
from typing import TypeVar

from exa_sdk.cli_support import (
    client_from_args,
    elapsed_ms,
    envelope_and_exit,
    wants_json,
    wants_plain,
)
from exa_sdk.client import Exa
from exa_sdk.config import ClientConfig
from exa_sdk.endpoints.search import SearchResult
from exa_sdk.errors import ExaError, ExitCode
from exa_sdk.output import EnvelopeMeta

T = TypeVar("T")


def run_with_client(
    args: argparse.Namespace, operation: Callable[[Exa], Awaitable[T]]
) -> tuple[T, ClientConfig]:
    async def _go() -> tuple[T, ClientConfig]:
        async with client_from_args(args) as exa:
            return await operation(exa), exa.config

    return asyncio.run(_go())


def _preview(result: SearchResult, *, limit: int = 200) -> str | None:
    if result.highlights:
        return result.highlights[0]
    if result.summary:
        return result.summary
    if result.text:
        text = " ".join(result.text.split())
        return text if len(text) <= limit else f"{text[: limit - 3]}..."
    return None


def emit_results(
    *,
    args: argparse.Namespace,
    command: str,
    endpoint: str,
    base_url: str,
    results: list[SearchResult],
    data: dict,
    warnings: list[str],
    start: float,
) -> int:
    if wants_plain(args):
        for r in results:
            print(r.url)
        return ExitCode.OK if results else ExitCode.NOT_FOUND

    meta = EnvelopeMeta(duration_ms=elapsed_ms(start), endpoint=endpoint, base_url=base_url)
    if not results:
        if not wants_json(args):
            print("no results", file=sys.stderr)
            return ExitCode.NOT_FOUND
        err = ExaError(code="not_found", message="no results", exit_code=ExitCode.NOT_FOUND)
        return envelope_and_exit(
            args=args,
            command=command,
            ok=False,
            data=data,
            warnings=warnings,
            error=err,
            meta=meta,
        )

    if not wants_json(args):
        for idx, r in enumerate(results, start=1):
            print(f"{idx}. {r.title}")
            print(f"   {r.url}")
            preview = _preview(r)
            if preview:
                print(f"   {preview}")
        return ExitCode.OK

    return envelope_and_exit(
        args=args,
        command=command,
        ok=True,
        data=data,
        warnings=warnings,
        error=None,
        meta=meta,
    )
