"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import asyncio
import logging
import sys

from issuelens.cli.commands.browse import run_browse
from issuelens.cli.commands.search import run_search
from issuelens.cli.parser import build_parser
from issuelens.contracts.exceptions import AuthenticationError, ConfigError, InvalidPathError, IssueLensError

_COMMANDS = {
    "browse": run_browse,
    "search": run_search,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return asyncio.run(_COMMANDS[args.command](args))
    except InvalidPathError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except AuthenticationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except IssueLensError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130


__all__ = ["main"]
