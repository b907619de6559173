"""GitHub GraphQL payload models and session state.

Models accept the camelCase names GitHub sends on the wire and expose
snake_case attributes. Everything is frozen: state transitions build new
snapshots with ``model_copy`` instead of mutating in place.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from issuelens.contracts.result import QueryFailure

_WIRE = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class PageInfo(BaseModel):
    model_config = _WIRE

    end_cursor: str | None = Field(default=None, alias="endCursor")
    has_next_page: bool = Field(default=False, alias="hasNextPage")


class Issue(BaseModel):
    """A single issue (or pull request, for search hits)."""

    model_config = _WIRE

    id: str
    title: str
    url: str
    created_at: datetime | None = Field(default=None, alias="createdAt")
    repository_name: str | None = Field(default=None, alias="repositoryName")

    @model_validator(mode="before")
    @classmethod
    def _flatten_repository(cls, data: Any) -> Any:
        # search nodes carry ``repository { name }``
        if isinstance(data, dict) and isinstance(data.get("repository"), dict):
            data = dict(data)
            data.setdefault("repositoryName", data.pop("repository").get("name"))
        return data


class IssueEdge(BaseModel):
    model_config = _WIRE

    node: Issue


class IssueConnection(BaseModel):
    """Paginated issue list. Edge order is the server's order."""

    model_config = _WIRE

    edges: tuple[IssueEdge, ...] = ()
    total_count: int = Field(default=0, validation_alias=AliasChoices("totalCount", "issueCount", "total_count"))
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")


class Repository(BaseModel):
    model_config = _WIRE

    id: str
    name: str
    url: str
    stargazer_count: int = Field(default=0, alias="stargazerCount")
    viewer_has_starred: bool = Field(default=False, alias="viewerHasStarred")
    issues: IssueConnection = Field(default_factory=IssueConnection)


class Organization(BaseModel):
    model_config = _WIRE

    name: str | None = None
    url: str
    repository: Repository | None = None


class GraphQLError(BaseModel):
    """One entry of a GraphQL response's ``errors`` array."""

    model_config = _WIRE

    message: str
    type: str | None = None
    path: tuple[str | int, ...] | None = None
    locations: tuple[dict[str, int], ...] | None = None


GraphQLErrors = tuple[GraphQLError, ...]


class RepositoryIssuesPage(BaseModel):
    """Success payload of the browse-issues query."""

    model_config = _WIRE

    organization: Organization | None = None
    errors: GraphQLErrors | None = None


class SearchIssuesPage(BaseModel):
    """Success payload of the search-issues query."""

    model_config = _WIRE

    search: IssueConnection | None = None
    errors: GraphQLErrors | None = None


class SessionState(BaseModel):
    """Snapshot of one browsing session."""

    model_config = ConfigDict(frozen=True)

    path: str
    organization: Organization | None = None
    errors: GraphQLErrors | None = None
    query: str = ""
    failure: QueryFailure | None = None
    showing_search: bool = False

    @property
    def issues(self) -> IssueConnection | None:
        if self.organization is None or self.organization.repository is None:
            return None
        return self.organization.repository.issues
