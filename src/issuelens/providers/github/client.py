"""Async GraphQL client for browsing and searching repository issues."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from issuelens.contracts.config import DEFAULT_ENDPOINT, SearchScope
from issuelens.contracts.exceptions import InvalidPathError
from issuelens.contracts.models import RepositoryIssuesPage, SearchIssuesPage
from issuelens.contracts.result import FailureKind, QueryFailure, QueryResult, QuerySuccess
from issuelens.providers.github.queries import GET_ISSUES_OF_REPOSITORY, SEARCH_ISSUES

_LOG = logging.getLogger(__name__)

PageT = TypeVar("PageT", bound=BaseModel)


def split_path(path: str) -> tuple[str, str]:
    """Split ``"org/repo"`` into its two segments.

    Raises:
        InvalidPathError: Unless the path has exactly two non-empty segments.
    """
    parts = path.strip().split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise InvalidPathError(path)
    return parts[0], parts[1]


def build_search_text(organization: str, repository: str, query_text: str, scope: SearchScope) -> str:
    if scope is SearchScope.GLOBAL:
        return query_text
    return f"repo:{organization}/{repository} {query_text}".rstrip()


class GitHubIssuesClient:
    """Posts the two fixed issue queries to a GitHub GraphQL endpoint.

    Stateless apart from the underlying ``httpx.AsyncClient``: no retries,
    no caching. Every call returns a :data:`QueryResult`; transport and
    HTTP failures are values, not exceptions. GraphQL ``errors`` arrive
    inside a successful page and must be checked by the caller.

    Use as an async context manager unless an ``http_client`` is injected::

        async with GitHubIssuesClient(token=token) as client:
            result = await client.fetch_repository_issues("facebook/react")
    """

    def __init__(
        self,
        *,
        token: str | None,
        endpoint: str = DEFAULT_ENDPOINT,
        page_size: int = 15,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token = token
        self._endpoint = endpoint
        self._page_size = page_size
        self._timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> GitHubIssuesClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
            self._owns_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch_repository_issues(
        self, path: str, cursor: str | None = None
    ) -> QueryResult[RepositoryIssuesPage]:
        """Fetch one page of open issues; ``cursor=None`` is the first page."""
        organization, repository = split_path(path)
        variables = {
            "organization": organization,
            "repository": repository,
            "cursor": cursor,
            "first": self._page_size,
        }
        return await self._post("fetch_repository_issues", GET_ISSUES_OF_REPOSITORY, variables, RepositoryIssuesPage)

    async def search_issues(
        self,
        path: str,
        cursor: str | None,
        query_text: str,
        *,
        scope: SearchScope,
    ) -> QueryResult[SearchIssuesPage]:
        """Run a free-text issue search. Empty ``query_text`` is still sent."""
        organization, repository = split_path(path)
        variables = {
            "query": build_search_text(organization, repository, query_text, scope),
            "cursor": cursor,
            "first": self._page_size,
        }
        return await self._post("search_issues", SEARCH_ISSUES, variables, SearchIssuesPage)

    def _headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"bearer {self._token}"}

    async def _post(
        self,
        operation: str,
        query: str,
        variables: dict[str, Any],
        page_type: type[PageT],
    ) -> QueryResult[PageT]:
        if self._client is None:
            raise RuntimeError("GitHubIssuesClient is not open; use it as an async context manager")

        _LOG.debug("GraphQL %s variables=%s", operation, variables)
        try:
            response = await self._client.post(
                self._endpoint,
                json={"query": query, "variables": variables},
                headers=self._headers(),
            )
        except httpx.RequestError as exc:
            return self._failure(operation, FailureKind.TRANSPORT, str(exc) or type(exc).__name__)

        if not response.is_success:
            return self._failure(
                operation,
                FailureKind.HTTP_STATUS,
                _error_message(response),
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError:
            return self._failure(operation, FailureKind.MALFORMED_RESPONSE, "response body is not JSON")
        if not isinstance(payload, dict):
            return self._failure(operation, FailureKind.MALFORMED_RESPONSE, "response body is not a JSON object")

        data = payload.get("data") or {}
        if not isinstance(data, dict):
            return self._failure(operation, FailureKind.MALFORMED_RESPONSE, "response data is not a JSON object")
        try:
            page = page_type.model_validate({**data, "errors": payload.get("errors")})
        except ValidationError as exc:
            return self._failure(operation, FailureKind.MALFORMED_RESPONSE, str(exc))

        _LOG.debug("GraphQL %s response=%s", operation, payload)
        return QuerySuccess(page)

    @staticmethod
    def _failure(
        operation: str, kind: FailureKind, detail: str, *, status_code: int | None = None
    ) -> QueryFailure:
        failure = QueryFailure(kind=kind, detail=detail, status_code=status_code)
        _LOG.warning("GraphQL %s failed: %s", operation, failure)
        return failure


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or "request failed"
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return response.reason_phrase or "request failed"
