"""Rich renderer for a session snapshot."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.rule import Rule
from rich.text import Text
from rich.tree import Tree

from issuelens.contracts.models import Issue, Organization, SessionState
from issuelens.engine.reducer import RenderMode, has_more, render_mode

TITLE = "Repository issues"
NO_DATA_TEXT = "No information yet ..."
MORE_HINT = "[bold]More[/] issues available"


def link(label: str, url: str) -> str:
    return f"[link={url}]{escape(label)}[/link]"


def issue_line(issue: Issue) -> str:
    line = link(issue.title, issue.url)
    if issue.repository_name:
        line += f" [dim]({escape(issue.repository_name)})[/]"
    if issue.created_at is not None:
        line += f" [dim]{issue.created_at:%Y-%m-%d}[/]"
    return line


def organization_tree(organization: Organization) -> Tree:
    tree = Tree(f"[bold]Issues from Organization:[/] {link(organization.name or organization.url, organization.url)}")
    repository = organization.repository
    if repository is None:
        return tree

    starred = " [yellow]★ starred[/]" if repository.viewer_has_starred else ""
    branch = tree.add(
        f"[bold]In Repository:[/] {link(repository.name, repository.url)}"
        f" [dim]({repository.stargazer_count} stars, {repository.issues.total_count} issues)[/]{starred}"
    )
    for edge in repository.issues.edges:
        branch.add(issue_line(edge.node))
    return tree


def render_state(state: SessionState) -> RenderableType:
    parts: list[RenderableType] = [Text(TITLE, style="bold underline")]
    if state.query:
        parts.append(Text(f"Search: {state.query}", style="cyan"))
    parts.append(Rule())

    mode = render_mode(state)
    if state.failure is not None:
        parts.append(Text.from_markup(f"[red]Request failed:[/] {escape(str(state.failure))}"))

    if mode is RenderMode.ERRORS:
        messages = " ".join(error.message for error in state.errors or ())
        parts.append(Text.from_markup(f"[bold red]Something went wrong:[/] {escape(messages)}"))
    elif mode is RenderMode.DATA and state.organization is not None:
        parts.append(organization_tree(state.organization))
        if has_more(state):
            parts.append(Rule())
            parts.append(Text.from_markup(MORE_HINT))
    elif mode is not RenderMode.FAILURE:
        parts.append(Text(NO_DATA_TEXT))

    return Group(*parts)
