"""GitHub GraphQL provider."""

from issuelens.providers.github.client import GitHubIssuesClient, split_path

__all__ = ["GitHubIssuesClient", "split_path"]
