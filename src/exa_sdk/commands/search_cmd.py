from __future__ import annotations

import argparse

from exa_sdk.cli_support import (
    add_content_flags,
    add_filter_flags,
    append_warning,
    content_options_from_args,
    filter_kwargs_from_args,
)
from exa_sdk.commands.support import emit_results, run_with_client
from exa_sdk.endpoints.search import SEARCH_PATH, SearchKind, SearchRequest


def register(
    subparsers: argparse._SubParsersAction, *, parents: list[argparse.ArgumentParser]
) -> None:
    p = subparsers.add_parser("search", parents=parents, help="Search the web")
    p.set_defaults(_handler=run)

    p.add_argument("query", type=str, help="Search query")
    p.add_argument(
        "--type",
        dest="kind",
        type=str,
        choices=[k.value for k in SearchKind],
        default=None,
        help="Search type (default: service decides)",
    )
    p.add_argument(
        "--autoprompt",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Let the service rewrite the query",
    )
    add_filter_flags(p)
    add_content_flags(p)


def run(*, args: argparse.Namespace, start: float, warnings: list[str]) -> int:
    request = SearchRequest(
        query=str(args.query).strip(),
        use_autoprompt=args.autoprompt,
        kind=args.kind,
        contents=content_options_from_args(args),
        **filter_kwargs_from_args(args),
    )
    response, config = run_with_client(args, lambda exa: exa.search(request))

    if response.autoprompt_string:
        append_warning(warnings, f"query rewritten by autoprompt: {response.autoprompt_string}")

    return emit_results(
        args=args,
        command="search",
        endpoint=SEARCH_PATH,
        base_url=config.base_url,
        results=response.results,
        data=response.to_dict(),
        warnings=warnings,
        start=start,
    )
