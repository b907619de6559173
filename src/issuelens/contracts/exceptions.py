"""Exception hierarchy for issuelens."""

from __future__ import annotations


class IssueLensError(Exception):
    """Base exception for all issuelens errors."""


class ConfigError(IssueLensError):
    """Configuration loading or validation failure."""


class AuthenticationError(IssueLensError):
    """Token could not be resolved."""


class InvalidPathError(IssueLensError, ValueError):
    """Repository path is not of the form ``organization/repository``."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid repository path '{path}'. Expected organization/repository.")
        self.path = path


class SessionStateError(IssueLensError):
    """Operation is not valid for the current session state."""
