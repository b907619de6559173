"""Resolver for a token given directly in the config file."""

from __future__ import annotations

from dataclasses import dataclass, field

from issuelens.auth.base import TokenResolver
from issuelens.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str = field(repr=False)

    async def resolve(self) -> str:
        if not self.token.strip():
            raise AuthenticationError("Config token is empty")
        return self.token.strip()
