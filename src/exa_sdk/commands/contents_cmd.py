from __future__ import annotations

import argparse
import sys

from exa_sdk.cli_support import (
    add_content_flags,
    elapsed_ms,
    envelope_and_exit,
    highlights_options_from_args,
    summary_options_from_args,
    text_options_from_args,
    wants_json,
    wants_plain,
)
from exa_sdk.commands.support import run_with_client
from exa_sdk.endpoints.contents import CONTENTS_PATH, ContentsRequest
from exa_sdk.errors import ExaError, ExitCode
from exa_sdk.output import EnvelopeMeta


def register(
    subparsers: argparse._SubParsersAction, *, parents: list[argparse.ArgumentParser]
) -> None:
    p = subparsers.add_parser("contents", parents=parents, help="Fetch contents for result ids")
    p.set_defaults(_handler=run)

    p.add_argument("ids", nargs="+", help="Result ids (as returned by search)")
    add_content_flags(p)


def run(*, args: argparse.Namespace, start: float, warnings: list[str]) -> int:
    request = ContentsRequest(
        ids=[str(i) for i in args.ids],
        text=text_options_from_args(args),
        highlights=highlights_options_from_args(args),
        summary=summary_options_from_args(args),
    )
    response, config = run_with_client(args, lambda exa: exa.get_contents(request))
    results = response.results

    if wants_plain(args):
        for r in results:
            print(f"{r.id}\t{r.url}")
        return ExitCode.OK if results else ExitCode.NOT_FOUND

    meta = EnvelopeMeta(
        duration_ms=elapsed_ms(start), endpoint=CONTENTS_PATH, base_url=config.base_url
    )
    if not wants_json(args):
        if not results:
            print("no results", file=sys.stderr)
            return ExitCode.NOT_FOUND
        for r in results:
            print(f"# {r.title}")
            print(r.url)
            if r.summary:
                print(f"\n{r.summary}")
            for highlight in r.highlights or ():
                print(f"> {highlight}")
            if r.text:
                print(f"\n{r.text}")
            print()
        return ExitCode.OK

    error = None
    if not results:
        error = ExaError(code="not_found", message="no results", exit_code=ExitCode.NOT_FOUND)
    return envelope_and_exit(
        args=args,
        command="contents",
        ok=error is None,
        data=response.to_dict(),
        warnings=warnings,
        error=error,
        meta=meta,
    )
