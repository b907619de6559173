"""Search command handler."""

from __future__ import annotations

import argparse

from rich.console import Console

from issuelens.auth import create_token_resolver
from issuelens.cli.common import QUERY_FAILURE_EXIT_CODE, resolve_config
from issuelens.engine.session import IssueSession
from issuelens.providers import create_client
from issuelens.renderers import render_state


async def run_search(args: argparse.Namespace) -> int:
    config = resolve_config(args)
    token = await create_token_resolver(config).resolve()

    async with create_client(config, token=token) as client:
        session = IssueSession(client, path=config.path, scope=config.search_scope)
        session.set_query(args.query)
        state = await session.search()

    Console().print(render_state(state))
    return QUERY_FAILURE_EXIT_CODE if state.failure is not None else 0
