"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("issuelens")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to an issuelens.json config file")
    parser.add_argument(
        "--global-search",
        action="store_true",
        help="Search across all of GitHub instead of only the selected repository",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="issuelens")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    browse_parser = subparsers.add_parser("browse", help="Browse open issues of a repository")
    browse_parser.add_argument("path", nargs="?", default=None, help="Repository as organization/repository")
    browse_parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Print the listing and exit instead of prompting",
    )
    browse_parser.add_argument(
        "--pages",
        type=int,
        default=1,
        help="Number of pages to load in non-interactive mode (default: 1)",
    )
    _add_common_arguments(browse_parser)

    search_parser = subparsers.add_parser("search", help="Search issues and print the results")
    search_parser.add_argument("path", help="Repository as organization/repository")
    search_parser.add_argument("query", help="Free-text search query (may be empty)")
    _add_common_arguments(search_parser)

    return parser


__all__ = ["build_parser"]
