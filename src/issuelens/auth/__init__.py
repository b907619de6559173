"""Auth module public exports."""

from issuelens.auth.base import TokenResolver
from issuelens.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
