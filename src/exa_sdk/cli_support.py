from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from typing import Any

from exa_sdk import __version__
from exa_sdk.client import Exa
from exa_sdk.endpoints.options import (
    ContentOptions,
    HighlightsOptions,
    SummaryOptions,
    TextOptions,
)
from exa_sdk.errors import ExaError, ExitCode
from exa_sdk.output import EnvelopeMeta, make_envelope, print_json
from exa_sdk.timeutil import iso_since, parse_duration
from exa_sdk.urlutil import normalize_domains

BASE_URL_ENV = "EXA_BASE_URL"


def wants_json(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "json", False) or getattr(args, "pretty", False))


def wants_plain(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "plain", False) and not wants_json(args))


def append_warning(warnings: list[str], message: str) -> None:
    if message not in warnings:
        warnings.append(message)


def add_global_flags(parser: argparse.ArgumentParser, *, suppress_defaults: bool) -> None:
    def default(value):
        return argparse.SUPPRESS if suppress_defaults else value

    parser.add_argument(
        "--json",
        action="store_true",
        default=default(False),
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=default(False),
        help="Pretty-print JSON (implies --json)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        default=default(False),
        help="Stable text output for piping",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=default(False),
        help="Verbose diagnostics to stderr",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=default(30.0),
        help="Network timeout in seconds",
    )
    parser.add_argument(
        "--proxy",
        type=str,
        default=default(None),
        help="HTTP(S) proxy URL",
    )
    parser.add_argument(
        "--api-key",
        type=str,
        default=default(None),
        help="API key (default: $EXA_API_KEY)",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=default(None),
        help=f"API base URL (default: ${BASE_URL_ENV} or https://api.exa.ai)",
    )


def add_filter_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-n", "--num-results", type=int, default=None, help="Number of results")
    parser.add_argument(
        "--include-domain", action="append", default=[], help="Only these domains (repeatable)"
    )
    parser.add_argument(
        "--exclude-domain", action="append", default=[], help="Skip these domains (repeatable)"
    )
    parser.add_argument(
        "--include-text", action="append", default=[], help="Page text must contain (repeatable)"
    )
    parser.add_argument(
        "--exclude-text", action="append", default=[], help="Page text must not contain"
    )
    parser.add_argument("--start-published", type=str, default=None, help="ISO 8601 date")
    parser.add_argument("--end-published", type=str, default=None, help="ISO 8601 date")
    parser.add_argument("--start-crawl", type=str, default=None, help="ISO 8601 date")
    parser.add_argument("--end-crawl", type=str, default=None, help="ISO 8601 date")
    parser.add_argument(
        "--published-within",
        type=str,
        default=None,
        help="Shortcut for --start-published relative to now (e.g. 24h, 7d)",
    )


def add_content_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--text", action="store_true", help="Return page text")
    parser.add_argument(
        "--max-characters", type=int, default=None, help="Cap returned text length"
    )
    parser.add_argument(
        "--include-html-tags", action="store_true", default=None, help="Keep HTML tags in text"
    )
    parser.add_argument("--highlights", action="store_true", help="Return highlight snippets")
    parser.add_argument("--num-sentences", type=int, default=None, help="Sentences per highlight")
    parser.add_argument(
        "--highlights-per-url", type=int, default=None, help="Highlights per result"
    )
    parser.add_argument(
        "--highlight-query", type=str, default=None, help="Query to target highlights"
    )
    parser.add_argument("--summary", action="store_true", help="Return a summary")
    parser.add_argument("--summary-query", type=str, default=None, help="Question for the summary")


def _as_list(values: list[str] | None) -> list[str] | None:
    return list(values) if values else None


def filter_kwargs_from_args(args: argparse.Namespace) -> dict[str, Any]:
    start_published = args.start_published
    if args.published_within:
        try:
            window = parse_duration(str(args.published_within))
        except ValueError as e:
            raise ExaError(
                code="invalid_usage",
                message=str(e),
                exit_code=ExitCode.INVALID_USAGE,
            ) from None
        start_published = iso_since(window)

    return {
        "num_results": args.num_results,
        "include_domains": _as_list(normalize_domains(args.include_domain)),
        "exclude_domains": _as_list(normalize_domains(args.exclude_domain)),
        "include_text": _as_list(args.include_text),
        "exclude_text": _as_list(args.exclude_text),
        "start_published_date": start_published,
        "end_published_date": args.end_published,
        "start_crawl_date": args.start_crawl,
        "end_crawl_date": args.end_crawl,
    }


def text_options_from_args(args: argparse.Namespace) -> TextOptions | None:
    if not (args.text or args.max_characters is not None or args.include_html_tags):
        return None
    return TextOptions(max_characters=args.max_characters, include_html_tags=args.include_html_tags)


def highlights_options_from_args(args: argparse.Namespace) -> HighlightsOptions | None:
    wanted = (
        args.highlights
        or args.num_sentences is not None
        or args.highlights_per_url is not None
        or args.highlight_query is not None
    )
    if not wanted:
        return None
    return HighlightsOptions(
        num_sentences=args.num_sentences,
        highlights_per_url=args.highlights_per_url,
        query=args.highlight_query,
    )


def summary_options_from_args(args: argparse.Namespace) -> SummaryOptions | None:
    if not (args.summary or args.summary_query is not None):
        return None
    return SummaryOptions(query=args.summary_query)


def content_options_from_args(args: argparse.Namespace) -> ContentOptions | None:
    text = text_options_from_args(args)
    highlights = highlights_options_from_args(args)
    summary = summary_options_from_args(args)
    if text is None and highlights is None and summary is None:
        return None
    return ContentOptions(text=text, highlights=highlights, summary=summary)


def client_from_args(args: argparse.Namespace) -> Exa:
    return Exa(
        api_key=args.api_key,
        base_url=args.base_url or os.environ.get(BASE_URL_ENV),
        timeout=float(args.timeout),
        proxy=args.proxy,
    )


def configure_logging(args: argparse.Namespace) -> None:
    if not getattr(args, "verbose", False):
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def elapsed_ms(start: float) -> int:
    return int((time.time() - start) * 1000)


def print_envelope(args: argparse.Namespace, payload: dict) -> None:
    if not wants_json(args):
        return
    print_json(payload, pretty=bool(getattr(args, "pretty", False)))


def envelope_and_exit(
    *,
    args: argparse.Namespace,
    command: str,
    ok: bool,
    data: object,
    warnings: list[str],
    error: ExaError | None,
    meta: EnvelopeMeta,
) -> int:
    payload = make_envelope(
        ok=ok,
        command=command,
        version=__version__,
        data=data,
        warnings=warnings,
        error=None if error is None else error.to_error_dict(),
        meta=meta,
    )
    print_envelope(args, payload)
    return ExitCode.OK if ok else (error.exit_code if error is not None else ExitCode.RUNTIME_ERROR)
