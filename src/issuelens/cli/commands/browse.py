"""Browse command handler."""

from __future__ import annotations

import argparse

import questionary
from rich.console import Console

from issuelens.auth import create_token_resolver
from issuelens.cli.common import QUERY_FAILURE_EXIT_CODE, resolve_config
from issuelens.engine.session import IssueSession
from issuelens.providers import create_client
from issuelens.renderers import render_state

_SEARCH = "Search"
_MORE = "More"
_QUIT = "Quit"


async def run_browse(args: argparse.Namespace) -> int:
    config = resolve_config(args)
    token = await create_token_resolver(config).resolve()
    console = Console()

    async with create_client(config, token=token) as client:
        session = IssueSession(client, path=config.path, scope=config.search_scope)
        await session.load()

        if args.no_interactive:
            for _ in range(max(1, args.pages) - 1):
                if not session.has_more or session.state.failure is not None:
                    break
                await session.load_more()
            console.print(render_state(session.state))
            return QUERY_FAILURE_EXIT_CODE if session.state.failure is not None else 0

        console.print(render_state(session.state))
        await interactive_loop(session, console)
    return 0


async def interactive_loop(session: IssueSession, console: Console) -> None:
    while True:
        choices = [_SEARCH, _MORE, _QUIT] if session.has_more else [_SEARCH, _QUIT]
        action = await questionary.select("Action:", choices=choices).ask_async()
        if action is None or action == _QUIT:
            return

        if action == _SEARCH:
            text = await questionary.text("Search open issues:", default=session.state.query).ask_async()
            if text is None:
                continue
            session.set_query(text)
            await session.search()
        else:
            await session.load_more()

        console.print(render_state(session.state))
