"""Typed contracts shared across issuelens layers."""

from issuelens.contracts.config import DEFAULT_ENDPOINT, IssueLensConfig, SearchScope
from issuelens.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    InvalidPathError,
    IssueLensError,
    SessionStateError,
)
from issuelens.contracts.models import (
    GraphQLError,
    Issue,
    IssueConnection,
    IssueEdge,
    Organization,
    PageInfo,
    Repository,
    RepositoryIssuesPage,
    SearchIssuesPage,
    SessionState,
)
from issuelens.contracts.result import FailureKind, QueryFailure, QueryResult, QuerySuccess

__all__ = [
    "DEFAULT_ENDPOINT",
    "AuthenticationError",
    "ConfigError",
    "FailureKind",
    "GraphQLError",
    "InvalidPathError",
    "Issue",
    "IssueConnection",
    "IssueEdge",
    "IssueLensConfig",
    "IssueLensError",
    "Organization",
    "PageInfo",
    "QueryFailure",
    "QueryResult",
    "QuerySuccess",
    "Repository",
    "RepositoryIssuesPage",
    "SearchIssuesPage",
    "SearchScope",
    "SessionState",
    "SessionStateError",
]
