"""Helpers shared by CLI commands."""

from __future__ import annotations

import argparse

from issuelens.config import load_config
from issuelens.contracts.config import IssueLensConfig, SearchScope
from issuelens.providers.github.client import split_path

QUERY_FAILURE_EXIT_CODE = 5


def resolve_config(args: argparse.Namespace) -> IssueLensConfig:
    """Merge the optional config file with command-line overrides.

    The repository path is validated here so a malformed path fails before
    any token lookup or network I/O.
    """
    config = load_config(args.config) if args.config else IssueLensConfig()

    overrides: dict[str, object] = {}
    if getattr(args, "path", None):
        overrides["path"] = args.path
    if args.global_search:
        overrides["search_scope"] = SearchScope.GLOBAL
    if overrides:
        config = config.model_copy(update=overrides)

    split_path(config.path)
    return config
