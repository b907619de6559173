"""Session state transitions."""

from issuelens.engine.reducer import (
    RenderMode,
    apply_failure,
    has_more,
    initial_state,
    merge_issues_page,
    merge_search_page,
    render_mode,
)
from issuelens.engine.session import IssueSession

__all__ = [
    "IssueSession",
    "RenderMode",
    "apply_failure",
    "has_more",
    "initial_state",
    "merge_issues_page",
    "merge_search_page",
    "render_mode",
]
