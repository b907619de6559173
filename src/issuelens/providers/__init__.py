"""Provider factory."""

from __future__ import annotations

from issuelens.contracts.config import IssueLensConfig
from issuelens.providers.github import GitHubIssuesClient


def create_client(config: IssueLensConfig, *, token: str | None) -> GitHubIssuesClient:
    return GitHubIssuesClient(
        token=token,
        endpoint=config.endpoint,
        page_size=config.page_size,
        timeout=config.timeout,
    )


__all__ = ["GitHubIssuesClient", "create_client"]
