"""Pure state transitions for a browsing session.

Each function takes the previous :class:`SessionState` plus a page and
returns a new snapshot; nothing is mutated and no I/O happens here.
"""

from __future__ import annotations

from enum import Enum

from issuelens.contracts.exceptions import SessionStateError
from issuelens.contracts.models import RepositoryIssuesPage, SearchIssuesPage, SessionState
from issuelens.contracts.result import QueryFailure


class RenderMode(str, Enum):
    NO_DATA = "no_data"
    ERRORS = "errors"
    DATA = "data"
    FAILURE = "failure"


def initial_state(path: str, query: str = "") -> SessionState:
    return SessionState(path=path, query=query)


def merge_issues_page(previous: SessionState, page: RepositoryIssuesPage, *, had_cursor: bool) -> SessionState:
    """Fold a browse-issues page into the session.

    A first page (``had_cursor=False``) is adopted wholesale. A continuation
    appends its edges after the accumulated ones, without deduplication, and
    takes everything else (page info, total count, metadata) from the new page.
    """
    if not had_cursor:
        return previous.model_copy(
            update={
                "organization": page.organization,
                "errors": page.errors,
                "failure": None,
                "showing_search": False,
            }
        )

    new_org = page.organization
    old_issues = previous.issues
    if new_org is None or new_org.repository is None or old_issues is None:
        return previous.model_copy(update={"errors": page.errors, "failure": None})

    new_issues = new_org.repository.issues
    issues = new_issues.model_copy(update={"edges": old_issues.edges + new_issues.edges})
    repository = new_org.repository.model_copy(update={"issues": issues})
    organization = new_org.model_copy(update={"repository": repository})
    return previous.model_copy(update={"organization": organization, "errors": page.errors, "failure": None})


def merge_search_page(previous: SessionState, page: SearchIssuesPage) -> SessionState:
    """Replace the session's issues with a search connection.

    Organization and repository metadata are kept; only ``issues`` changes.
    """
    organization = previous.organization
    if organization is None or organization.repository is None:
        raise SessionStateError("Cannot merge search results before repository data is loaded")

    if page.search is None:
        return previous.model_copy(update={"errors": page.errors, "failure": None})

    repository = organization.repository.model_copy(update={"issues": page.search})
    return previous.model_copy(
        update={
            "organization": organization.model_copy(update={"repository": repository}),
            "errors": page.errors,
            "failure": None,
            "showing_search": True,
        }
    )


def apply_failure(previous: SessionState, failure: QueryFailure) -> SessionState:
    return previous.model_copy(update={"failure": failure})


def set_query(previous: SessionState, query: str) -> SessionState:
    return previous.model_copy(update={"query": query})


def render_mode(state: SessionState) -> RenderMode:
    if state.errors:
        return RenderMode.ERRORS
    if state.organization is not None:
        return RenderMode.DATA
    if state.failure is not None:
        return RenderMode.FAILURE
    return RenderMode.NO_DATA


def has_more(state: SessionState) -> bool:
    """True when another browse page can be appended; search results never paginate."""
    if state.showing_search:
        return False
    issues = state.issues
    return issues is not None and issues.page_info.has_next_page
