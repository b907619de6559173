"""Token resolver factory."""

from __future__ import annotations

from urllib.parse import urlparse

from issuelens.auth.base import TokenResolver
from issuelens.auth.resolvers import EnvTokenResolver, GhCliTokenResolver, StaticTokenResolver
from issuelens.contracts.config import IssueLensConfig
from issuelens.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "gh-cli": GhCliTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def _hostname_from_endpoint(endpoint: str) -> str:
    hostname = urlparse(endpoint.strip()).hostname
    if not hostname or hostname == "api.github.com":
        return "github.com"
    return hostname


def create_token_resolver(config: IssueLensConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "gh-cli":
        return GhCliTokenResolver(hostname=_hostname_from_endpoint(config.endpoint))
    if auth_mode == "env":
        return EnvTokenResolver(variable=config.token_env)
    return StaticTokenResolver(token=config.token or "")
