from __future__ import annotations

from rich.console import Console

from issuelens.contracts.models import GraphQLError, RepositoryIssuesPage, SearchIssuesPage, SessionState
from issuelens.contracts.result import FailureKind, QueryFailure
from issuelens.engine.reducer import apply_failure, merge_issues_page, merge_search_page
from issuelens.renderers.console import NO_DATA_TEXT, render_state
from tests.fakes.github import search_edges, search_payload


def _text(state: SessionState) -> str:
    console = Console(record=True, width=160, color_system=None)
    console.print(render_state(state))
    return console.export_text()


def test_no_data_placeholder(empty_state: SessionState) -> None:
    assert NO_DATA_TEXT in _text(empty_state)


def test_renders_tree_with_more_hint(loaded_state: SessionState) -> None:
    output = _text(loaded_state)

    assert "Issues from Organization: Meta" in output
    assert "In Repository: react" in output
    assert "Issue 0" in output
    assert "Issue 14" in output
    assert "More issues available" in output


def test_more_hint_hidden_on_last_page(loaded_state: SessionState, second_page: RepositoryIssuesPage) -> None:
    output = _text(merge_issues_page(loaded_state, second_page, had_cursor=True))

    assert "Issue 29" in output
    assert "More" not in output


def test_errors_replace_content(loaded_state: SessionState) -> None:
    state = loaded_state.model_copy(
        update={"errors": (GraphQLError(message="first."), GraphQLError(message="second."))}
    )

    output = _text(state)

    assert "Something went wrong: first. second." in output
    assert "In Repository" not in output


def test_failure_banner_keeps_previous_listing(loaded_state: SessionState) -> None:
    state = apply_failure(loaded_state, QueryFailure(FailureKind.HTTP_STATUS, "Bad credentials", status_code=401))

    output = _text(state)

    assert "Request failed: http_status (401): Bad credentials" in output
    assert "Issue 0" in output


def test_failure_without_data_hides_placeholder(empty_state: SessionState) -> None:
    output = _text(apply_failure(empty_state, QueryFailure(FailureKind.TRANSPORT, "connection refused")))

    assert "Request failed: transport: connection refused" in output
    assert NO_DATA_TEXT not in output


def test_search_results_show_repository_and_date(loaded_state: SessionState, search_page: SearchIssuesPage) -> None:
    state = merge_search_page(loaded_state, search_page).model_copy(update={"query": "hooks"})

    output = _text(state)

    assert "Search: hooks" in output
    assert "Match 0 (react) 2024-01-02" in output


def test_search_results_hide_more_hint(loaded_state: SessionState) -> None:
    page = SearchIssuesPage.model_validate(search_payload(search_edges(2), end_cursor="s1", has_next_page=True)["data"])

    output = _text(merge_search_page(loaded_state, page))

    assert "Match 1" in output
    assert "More" not in output
