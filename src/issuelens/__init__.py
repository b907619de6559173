"""Public API surface for issuelens."""

from issuelens.auth import create_token_resolver
from issuelens.config import load_config
from issuelens.contracts import (
    AuthenticationError,
    ConfigError,
    FailureKind,
    InvalidPathError,
    IssueLensConfig,
    IssueLensError,
    QueryFailure,
    QueryResult,
    QuerySuccess,
    SearchScope,
    SessionState,
    SessionStateError,
)
from issuelens.engine import IssueSession, merge_issues_page, merge_search_page
from issuelens.providers import create_client
from issuelens.providers.github import GitHubIssuesClient, split_path
from issuelens.renderers import render_state

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "FailureKind",
    "GitHubIssuesClient",
    "InvalidPathError",
    "IssueLensConfig",
    "IssueLensError",
    "IssueSession",
    "QueryFailure",
    "QueryResult",
    "QuerySuccess",
    "SearchScope",
    "SessionState",
    "SessionStateError",
    "create_client",
    "create_token_resolver",
    "load_config",
    "merge_issues_page",
    "merge_search_page",
    "render_state",
    "split_path",
]
