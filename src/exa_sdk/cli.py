from __future__ import annotations

import argparse
import sys
import time

from exa_sdk import __version__
from exa_sdk.cli_support import (
    add_global_flags,
    configure_logging,
    elapsed_ms,
    envelope_and_exit,
    wants_json,
)
from exa_sdk.commands import contents_cmd, find_similar_cmd, search_cmd
from exa_sdk.errors import ExaError
from exa_sdk.output import EnvelopeMeta


def build_parser() -> argparse.ArgumentParser:
    global_root = argparse.ArgumentParser(add_help=False)
    add_global_flags(global_root, suppress_defaults=False)

    global_sub = argparse.ArgumentParser(add_help=False)
    add_global_flags(global_sub, suppress_defaults=True)

    parser = argparse.ArgumentParser(prog="exa", parents=[global_root], add_help=True)
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    for module in (search_cmd, find_similar_cmd, contents_cmd):
        module.register(subparsers, parents=[global_sub])

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args)

    command = str(args.command)
    start = time.time()
    warnings: list[str] = []

    try:
        return args._handler(args=args, start=start, warnings=warnings)
    except ExaError as e:
        if wants_json(args):
            return envelope_and_exit(
                args=args,
                command=command,
                ok=False,
                data={},
                warnings=warnings,
                error=e,
                meta=EnvelopeMeta(duration_ms=elapsed_ms(start)),
            )
        print(f"error: {e}", file=sys.stderr)
        if e.details and args.verbose:
            print(f"details: {e.details}", file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
