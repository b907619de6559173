"""Session owning the mutable reference to the current state."""

from __future__ import annotations

import asyncio
import logging

from issuelens.contracts.config import SearchScope
from issuelens.contracts.exceptions import SessionStateError
from issuelens.contracts.models import SessionState
from issuelens.contracts.result import QueryFailure
from issuelens.engine import reducer
from issuelens.providers.github.client import GitHubIssuesClient, split_path

_LOG = logging.getLogger(__name__)


class IssueSession:
    """Drives one repository browsing session.

    Requests are serialized through a lock, so merges always run in request
    order. A failed request leaves the accumulated data untouched and only
    records ``state.failure``.
    """

    def __init__(
        self,
        client: GitHubIssuesClient,
        *,
        path: str,
        scope: SearchScope = SearchScope.REPOSITORY,
    ) -> None:
        split_path(path)
        self._client = client
        self._scope = scope
        self._lock = asyncio.Lock()
        self.state: SessionState = reducer.initial_state(path)

    @property
    def has_more(self) -> bool:
        return reducer.has_more(self.state)

    async def load(self) -> SessionState:
        async with self._lock:
            return await self._fetch(cursor=None)

    async def load_more(self) -> SessionState:
        async with self._lock:
            issues = self.state.issues
            if issues is None or not reducer.has_more(self.state):
                raise SessionStateError("No further issue pages to load")
            return await self._fetch(cursor=issues.page_info.end_cursor)

    def set_query(self, query: str) -> SessionState:
        self.state = reducer.set_query(self.state, query)
        return self.state

    async def search(self) -> SessionState:
        async with self._lock:
            if self.state.issues is None:
                await self._fetch(cursor=None)
                if self.state.issues is None:
                    _LOG.warning("Skipping search: repository %s could not be loaded", self.state.path)
                    return self.state

            result = await self._client.search_issues(self.state.path, None, self.state.query, scope=self._scope)
            if isinstance(result, QueryFailure):
                self.state = reducer.apply_failure(self.state, result)
            else:
                self.state = reducer.merge_search_page(self.state, result.page)
            return self.state

    async def _fetch(self, *, cursor: str | None) -> SessionState:
        result = await self._client.fetch_repository_issues(self.state.path, cursor)
        if isinstance(result, QueryFailure):
            self.state = reducer.apply_failure(self.state, result)
        else:
            self.state = reducer.merge_issues_page(self.state, result.page, had_cursor=cursor is not None)
            issues = self.state.issues
            if issues is not None:
                _LOG.debug("Session %s holds %d issue(s)", self.state.path, len(issues.edges))
        return self.state
