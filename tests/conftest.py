"""Shared test fixtures for issuelens tests."""

from __future__ import annotations

import pytest

from issuelens.contracts.models import RepositoryIssuesPage, SearchIssuesPage, SessionState
from tests.fakes.github import issue_edges, issues_payload, search_edges, search_payload


@pytest.fixture
def first_page() -> RepositoryIssuesPage:
    """Fifteen issues with a continuation cursor."""
    payload = issues_payload(issue_edges(15), end_cursor="c1", has_next_page=True)
    return RepositoryIssuesPage.model_validate(payload["data"])


@pytest.fixture
def second_page() -> RepositoryIssuesPage:
    """Fifteen more issues, last page."""
    payload = issues_payload(issue_edges(15, start=15), end_cursor="c2", has_next_page=False)
    return RepositoryIssuesPage.model_validate(payload["data"])


@pytest.fixture
def search_page() -> SearchIssuesPage:
    return SearchIssuesPage.model_validate(search_payload(search_edges(3))["data"])


@pytest.fixture
def empty_state() -> SessionState:
    return SessionState(path="facebook/react")


@pytest.fixture
def loaded_state(empty_state: SessionState, first_page: RepositoryIssuesPage) -> SessionState:
    return empty_state.model_copy(update={"organization": first_page.organization})
