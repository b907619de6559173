"""Configuration contracts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

DEFAULT_ENDPOINT = "https://api.github.com/graphql"


class SearchScope(str, Enum):
    """Whether a search is restricted to the session's repository."""

    REPOSITORY = "repository"
    GLOBAL = "global"


class IssueLensConfig(BaseModel):
    path: str = "facebook/react"
    endpoint: str = DEFAULT_ENDPOINT
    auth: str = "env"
    token: str | None = None
    token_env: str = "GITHUB_TOKEN"
    page_size: int = Field(default=15, ge=1, le=100)
    search_scope: SearchScope = SearchScope.REPOSITORY
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> IssueLensConfig:
        token = (self.token or "").strip()
        if self.auth not in {"gh-cli", "env", "token"}:
            raise ValueError("auth must be one of: gh-cli, env, token")
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        return self
