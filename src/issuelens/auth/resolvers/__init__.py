"""Concrete token resolvers."""

from issuelens.auth.resolvers.env import EnvTokenResolver
from issuelens.auth.resolvers.gh_cli import GhCliTokenResolver
from issuelens.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "GhCliTokenResolver", "StaticTokenResolver"]
