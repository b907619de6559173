import pytest

from issuelens.auth.factory import create_token_resolver
from issuelens.auth.resolvers import EnvTokenResolver, GhCliTokenResolver, StaticTokenResolver
from issuelens.contracts.config import IssueLensConfig
from issuelens.contracts.exceptions import ConfigError


def test_factory_creates_env_resolver_with_configured_variable() -> None:
    resolver = create_token_resolver(IssueLensConfig(auth="env", token_env="MY_TOKEN"))

    assert isinstance(resolver, EnvTokenResolver)
    assert resolver.variable == "MY_TOKEN"


def test_factory_creates_static_resolver() -> None:
    resolver = create_token_resolver(IssueLensConfig(auth="token", token="tok_123"))

    assert isinstance(resolver, StaticTokenResolver)
    assert resolver.token == "tok_123"


def test_factory_creates_gh_cli_resolver_for_public_github() -> None:
    resolver = create_token_resolver(IssueLensConfig(auth="gh-cli"))

    assert isinstance(resolver, GhCliTokenResolver)
    assert resolver.hostname == "github.com"


def test_factory_uses_hostname_from_enterprise_endpoint() -> None:
    config = IssueLensConfig(auth="gh-cli", endpoint="https://github.example.com/api/graphql")

    resolver = create_token_resolver(config)

    assert isinstance(resolver, GhCliTokenResolver)
    assert resolver.hostname == "github.example.com"


def test_factory_raises_for_unknown_auth_mode() -> None:
    config = IssueLensConfig.model_construct(auth="unsupported")

    with pytest.raises(ConfigError):
        create_token_resolver(config)
