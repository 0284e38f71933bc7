from __future__ import annotations

import argparse

from exa_sdk.cli_support import (
    add_content_flags,
    add_filter_flags,
    content_options_from_args,
    filter_kwargs_from_args,
)
from exa_sdk.commands.support import emit_results, run_with_client
from exa_sdk.endpoints.find_similar import FIND_SIMILAR_PATH, FindSimilarRequest


def register(
    subparsers: argparse._SubParsersAction, *, parents: list[argparse.ArgumentParser]
) -> None:
    p = subparsers.add_parser(
        "find-similar", parents=parents, help="Find pages similar to a URL"
    )
    p.set_defaults(_handler=run)

    p.add_argument("url", type=str, help="Page to find similar results for")
    add_filter_flags(p)
    add_content_flags(p)


def run(*, args: argparse.Namespace, start: float, warnings: list[str]) -> int:
    request = FindSimilarRequest(
        url=str(args.url),
        contents=content_options_from_args(args),
        **filter_kwargs_from_args(args),
    )
    response, config = run_with_client(args, lambda exa: exa.find_similar(request))

    return emit_results(
        args=args,
        command="find-similar",
        endpoint=FIND_SIMILAR_PATH,
        base_url=config.base_url,
        results=response.results,
        data=response.to_dict(),
        warnings=warnings,
        start=start,
    )
